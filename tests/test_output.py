"""Tests for ConsoleOutput."""

import io

from sculpt.capabilities import CapabilityProbe
from sculpt.config import ColorMode, ConsoleSettings
from sculpt.output import ConsoleOutput, is_binary_stream
from sculpt.styles import STYLES
from tests.conftest import FakeStream, written

RESET = STYLES["reset"]


class TestWrite:
    """Tests for write and write_ln methods."""

    def test_write_has_no_newline(self, make_output):
        output = make_output()
        output.write("<bold>Hello</bold>")
        output.write(" world")
        assert written(output) == "Hello world"

    def test_write_ln_appends_one_newline(self, make_output):
        output = make_output()
        output.write_ln("line")
        assert written(output) == "line\n"

    def test_write_styled(self, make_output):
        output = make_output(colors=True)
        output.write("<cyan>hi</cyan>")
        assert written(output) == STYLES["cyan"] + "hi" + RESET

    def test_binary_stream(self):
        output = ConsoleOutput(
            stream=io.BytesIO(), settings=ConsoleSettings(color=ColorMode.NEVER)
        )
        output.write("<bold>caf\u00e9</bold>")
        output.write_ln(" ok")
        assert output.stream.getvalue() == "caf\u00e9 ok\n".encode("utf-8")

    def test_binary_stream_styled(self):
        output = ConsoleOutput(
            stream=io.BytesIO(), settings=ConsoleSettings(color=ColorMode.ALWAYS)
        )
        output.success("Saved")
        assert output.stream.getvalue().startswith(STYLES["bg_green"].encode("ascii"))
        assert output.stream.getvalue().endswith(b"Saved\033[0m\n")

    def test_binary_file(self, tmp_path):
        path = tmp_path / "out.txt"
        with open(path, "wb") as stream:
            output = ConsoleOutput(
                stream=stream, settings=ConsoleSettings(color=ColorMode.NEVER)
            )
            output.table(["a"], [["\u00e9"]])
        assert path.read_bytes() == "| a |\n+---+\n| \u00e9 |\n".encode("utf-8")

    def test_is_binary_stream(self):
        assert is_binary_stream(io.BytesIO())
        assert not is_binary_stream(io.StringIO())
        assert not is_binary_stream(FakeStream())

    def test_format_follows_settings(self, make_output):
        assert make_output(colors=True).format("<red>x</red>") == STYLES["red"] + "x" + RESET
        assert make_output(colors=False).format("<red>x</red>") == "x"


class TestColorDecision:
    """Tests for how ConsoleOutput decides on colors."""

    def test_auto_uses_probe_for_tty(self, tty_probe):
        output = ConsoleOutput(stream=FakeStream(tty=True), probe=tty_probe)
        assert output.colors_enabled is True
        output.write("<red>x</red>")
        assert output.stream.getvalue() == STYLES["red"] + "x" + RESET

    def test_auto_uses_probe_for_redirected_stream(self, tty_probe):
        output = ConsoleOutput(stream=FakeStream(tty=False), probe=tty_probe)
        assert output.colors_enabled is False
        output.write("<red>x</red>")
        assert output.stream.getvalue() == "x"

    def test_always_and_never_bypass_probe(self, tty_probe):
        forced_on = ConsoleOutput(
            stream=io.StringIO(),
            probe=tty_probe,
            settings=ConsoleSettings(color=ColorMode.ALWAYS),
        )
        forced_off = ConsoleOutput(
            stream=FakeStream(tty=True),
            probe=tty_probe,
            settings=ConsoleSettings(color=ColorMode.NEVER),
        )
        assert forced_on.colors_enabled is True
        assert forced_off.colors_enabled is False

    def test_defaults_to_current_stdout(self, capsys):
        output = ConsoleOutput()
        output.write_ln("<green>to stdout</green>")
        assert capsys.readouterr().out == "to stdout\n"


class TestStatusMessages:
    """Tests for success, warning and error methods."""

    def test_success_plain(self, make_output):
        output = make_output()
        output.success("Saved")
        assert written(output) == " SUCCESS: Saved\n"

    def test_warning_plain(self, make_output):
        output = make_output()
        output.warning("Careful")
        assert written(output) == "! WARNING: Careful\n"

    def test_error_plain(self, make_output):
        output = make_output()
        output.error("Boom")
        assert written(output) == " ERROR: Boom\n"

    def test_success_styled(self, make_output):
        output = make_output(colors=True)
        output.success("Saved")
        assert written(output) == (
            STYLES["bg_green"] + STYLES["white"] + " SUCCESS:" + RESET + RESET
            + " " + STYLES["green"] + "Saved" + RESET + "\n"
        )

    def test_warning_styled(self, make_output):
        output = make_output(colors=True)
        output.warning("Careful")
        assert written(output) == STYLES["yellow"] + "! WARNING:" + RESET + " Careful\n"

    def test_error_styled(self, make_output):
        output = make_output(colors=True)
        output.error("Boom")
        assert written(output) == (
            STYLES["bg_red"] + STYLES["white"] + " ERROR:" + RESET + RESET
            + " " + STYLES["red"] + "Boom" + RESET + "\n"
        )


class TestTable:
    """Tests for the table method."""

    def test_layout(self, make_output):
        output = make_output()
        output.table(["a", "bb"], [["x", "yy"], ["zzz", "w"]])
        assert written(output) == (
            "| a   | bb |\n"
            "+-----+----+\n"
            "| x   | yy |\n"
            "| zzz | w  |\n"
        )

    def test_short_rows_and_extra_columns(self, make_output):
        output = make_output()
        output.table(["name", "version"], [["click"], ["yaml", "6.0", "extra"]])
        assert written(output) == (
            "| name  | version |       |\n"
            "+-------+---------+-------+\n"
            "| click |         |       |\n"
            "| yaml  | 6.0     | extra |\n"
        )

    def test_mappings_are_reindexed(self, make_output):
        output = make_output()
        output.table({"first": "k", "second": "v"}, [{"x": "a", "y": "b"}])
        assert written(output) == "| k | v |\n+---+---+\n| a | b |\n"

    def test_multibyte_cells(self, make_output):
        output = make_output()
        output.table(["city"], [["Zürich"], ["Genève"]])
        assert written(output) == (
            "| city   |\n"
            "+--------+\n"
            "| Zürich |\n"
            "| Genève |\n"
        )

    def test_no_rows(self, make_output):
        output = make_output()
        output.table(["only"], [])
        assert written(output) == "| only |\n+------+\n"

    def test_goes_through_styling(self, make_output):
        output = make_output(colors=True)
        output.table(["<red>"], [])
        assert STYLES["red"] in written(output)
