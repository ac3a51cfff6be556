"""Interactive console prompts.

Three flows read validated answers from a line-oriented input stream:

- ask: free text with an optional default
- confirm: yes/no, collapsing end-of-stream into the default
- choice: numbered menu, re-prompting until the answer is valid

End-of-stream (closed pipe, Ctrl+D) is reported by ``ask`` as the
``END_OF_STREAM`` sentinel so callers can tell it apart from an empty answer.
"""

import logging
import sys
from enum import Enum
from typing import Any, Iterable, Literal, Mapping, Union

from .errors import InvalidChoiceError
from .output import ConsoleOutput
from .table import reindex

_logging = logging.getLogger(__name__)


class _EndOfStream(Enum):
    END_OF_STREAM = "END_OF_STREAM"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "END_OF_STREAM"


END_OF_STREAM = _EndOfStream.END_OF_STREAM

AskResult = Union[str, None, Literal[_EndOfStream.END_OF_STREAM]]


def is_end_of_stream(result: Any) -> bool:
    return result is END_OF_STREAM


class ConsoleInput:
    """Reads answers to questions rendered through a ConsoleOutput.

    Args:
        output: Renderer used for questions, menus and error messages
        stream: Input stream; defaults to sys.stdin, looked up on each read
    """

    def __init__(self, output: ConsoleOutput, stream=None):
        self.output = output
        self._stream = stream

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self) -> str | None:
        """Read one line, or return None once the stream is exhausted."""
        line = self.stream.readline()
        if not line:
            return None
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        return line

    def ask(self, question: str, default: str | None = None) -> AskResult:
        """Ask a question and return the answer.

        Args:
            question: Question text, may contain markup
            default: Returned when the answer is blank

        Returns:
            The trimmed answer, the default for a blank answer, or
            END_OF_STREAM when no more input will arrive
        """
        self.output.write(question)

        if default is not None:
            self.output.write(f" (default: {default}):\n> ")
        else:
            self.output.write(":\n> ")

        line = self.read_line()

        if line is None:
            _logging.debug(f"End of input while asking: {question!r}")
            return END_OF_STREAM

        answer = line.strip()
        return answer if answer != "" else default

    def confirm(self, question: str, default: bool = True) -> bool:
        """Ask a yes/no question.

        Any answer starting with 'y' or 'Y' counts as yes. End of input
        returns ``default``.
        """
        response = self.ask(f"{question} (y/n)", "y" if default else "n")

        if response is END_OF_STREAM:
            return default

        return (response or "")[:1].lower() == "y"

    def choice(
        self,
        question: str,
        choices: Iterable[str] | Mapping[Any, str],
        default: int | None = None,
    ) -> str:
        """Multiple choice question.

        Args:
            question: Question text
            choices: Choice texts; mappings are taken positionally by value
            default: Default choice, 1-based to match the displayed numbers

        Returns:
            The selected choice text. At end of input this is the default
            choice, or the first choice when there is no default.

        Raises:
            InvalidChoiceError: If there are no choices or the default is out
                of range. Nothing is written in that case.
        """
        choices = reindex(choices)
        count = len(choices)

        if count == 0:
            raise InvalidChoiceError("At least one choice is required")

        if default is not None and not 1 <= default <= count:
            raise InvalidChoiceError(f"Default choice must be between 1 and {count}")

        self.output.write_ln(question)

        for number, text in enumerate(choices, start=1):
            default_marker = " (default)" if default == number else ""
            self.output.write_ln(f"  [{number}] {text}{default_marker}")

        while True:
            answer = self.ask(
                "Enter your choice", str(default) if default is not None else None
            )

            if answer is END_OF_STREAM:
                return choices[default - 1] if default is not None else choices[0]

            # ASCII digits only: str.isdigit alone accepts superscripts
            if answer and answer.isascii() and answer.isdigit():
                index = int(answer) - 1
                if 0 <= index < count:
                    return choices[index]

            _logging.debug(f"Rejected choice {answer!r} (expected 1-{count})")
            self.output.error(f"Please enter a number between 1 and {count}")


__all__ = [
    "END_OF_STREAM",
    "AskResult",
    "is_end_of_stream",
    "ConsoleInput",
]
