"""Tests for sculpt."""
