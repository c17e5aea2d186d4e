"""Tests for the interactive command shell."""

import io

import pytest

from bytepy.core.editor import HexEditor
from bytepy.core.syntax import DumpHighlighter
from bytepy.ui.reference import HELP_TEXT, TEMPLATE_TEXT
from bytepy.ui.shell import GOODBYE_MESSAGE, CommandShell


@pytest.fixture
def shell():
    out = io.StringIO()
    with HexEditor() as editor:
        yield CommandShell(editor, out=out)


def output(shell):
    text = shell.out.getvalue()
    shell.out.seek(0)
    shell.out.truncate()
    return text


class TestDispatch:
    """Tests for command parsing and dispatch."""

    def test_blank_line_is_ignored(self, shell):
        assert shell.handle_line("   ") is True
        assert output(shell) == ""

    def test_unknown_command(self, shell):
        assert shell.handle_line("frobnicate 1 2") is True
        assert output(shell) == "unknown command frobnicate type (h)elp!\n"

    @pytest.mark.parametrize("line", ["d 0", "dump 0", "i 0 n", "e 0 0x00", 's "a"', "c"])
    def test_session_commands_need_open_file(self, shell, line):
        shell.handle_line(line)
        assert output(shell) == "open a file first!\n"

    def test_help_and_template(self, shell):
        shell.handle_line("h")
        assert output(shell) == HELP_TEXT + "\n"

        shell.handle_line("template")
        assert output(shell) == TEMPLATE_TEXT + "\n"

    def test_quit_closes_file(self, shell, zero_file):
        shell.handle_line(f"o {zero_file}")
        output(shell)

        assert shell.handle_line("q") is False
        assert output(shell) == f"closed {zero_file}\n{GOODBYE_MESSAGE}\n"
        assert not shell.editor.session.is_open


class TestCommands:
    """Tests for the output of each command."""

    def test_open_and_reopen(self, shell, zero_file, make_file):
        other = make_file(b"abc")

        shell.handle_line(f"open {zero_file}")
        assert output(shell) == f"{zero_file} is open for editing...\n"

        shell.handle_line(f"o {other}")
        assert output(shell) == f"closed {zero_file}\n{other} is open for editing...\n"

    def test_open_failure_reports_error(self, shell, tmp_path):
        shell.handle_line(f"o {tmp_path / 'nope.bin'}")
        assert output(shell).startswith("couldn't open")
        assert not shell.editor.session.is_open

    def test_edit_dump_scenario(self, shell, zero_file):
        shell.handle_line(f"o {zero_file}")
        shell.handle_line("e 5 0xff 0xee")
        output(shell)

        shell.handle_line("d 0 20")
        lines = output(shell).splitlines()

        assert lines == [
            "00  00 00 00 00 00 ff ee 00  00 00 00 00 00 00 00 00  |................|",
            "10  00 00 00 00" + " " * 39 + "|....|",
        ]

    def test_dump_error_is_reported(self, shell, zero_file):
        shell.handle_line(f"o {zero_file}")
        output(shell)

        shell.handle_line("d 0 0")
        assert output(shell) == "length must be greater than 0!\n"

    def test_inspect_prints_values_space_joined(self, shell, make_file):
        shell.handle_line(f"o {make_file(b'WAVE' + bytes([0, 10, 10, 0, 0xff]))}")
        output(shell)

        shell.handle_line("i 0 a4 n v c")
        assert output(shell) == "WAVE 10 10 -1\n"

    def test_inspect_invalid_template(self, shell, zero_file):
        shell.handle_line(f"o {zero_file}")
        output(shell)

        shell.handle_line("i 0 nZ")
        assert output(shell) == "invalid format option 'Z'\n"

    def test_inspect_non_ascii_count_is_reported(self, shell, zero_file):
        shell.handle_line(f"o {zero_file}")
        output(shell)

        assert shell.handle_line("i 0 C²") is True
        assert output(shell) == "invalid format option '²'\n"

    def test_edit_invalid_literal(self, shell, zero_file):
        shell.handle_line(f"o {zero_file}")
        output(shell)

        shell.handle_line("e 0 12")
        assert output(shell).startswith("byte values must be hexadecimal constants!")

    def test_search_streams_matches(self, shell, zero_file):
        shell.handle_line(f"o {zero_file}")
        output(shell)

        shell.handle_line('s "\\x00\\x00"')
        lines = output(shell).splitlines()

        assert len(lines) == 18
        assert lines[0] == "Found \\x00\\x00 starting at offset: 0"
        assert lines[-1] == "Found \\x00\\x00 starting at offset: 17"

    def test_search_pattern_with_spaces(self, shell, make_file):
        shell.handle_line(f"o {make_file(b'say hello world')}")
        output(shell)

        shell.handle_line('search "hello world"')
        assert output(shell) == "Found hello world starting at offset: 4\n"

    def test_close(self, shell, zero_file):
        shell.handle_line(f"o {zero_file}")
        output(shell)

        shell.handle_line("close")
        assert output(shell) == f"closed {zero_file}\n"
        assert not shell.editor.session.is_open


class TestRun:
    """Tests for the read-eval-print loop."""

    def test_run_until_quit(self, shell, zero_file, monkeypatch):
        lines = iter(["", "d 0 4", "quit", "d 0 4"])
        monkeypatch.setattr("builtins.input", lambda prompt: next(lines))

        shell.run(str(zero_file))
        text = output(shell)

        assert f"{zero_file} is open for editing..." in text
        assert "00  00 00 00 00" in text
        assert text.endswith(f"closed {zero_file}\n{GOODBYE_MESSAGE}\n")
        assert next(lines) == "d 0 4"

    def test_end_of_input_closes_file(self, shell, zero_file, monkeypatch):
        def raise_eof(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)

        shell.run(str(zero_file))

        assert not shell.editor.session.is_open
        assert output(shell).endswith(f"closed {zero_file}\n{GOODBYE_MESSAGE}\n")

    def test_file_closed_on_unexpected_error(self, shell, zero_file, monkeypatch):
        def broken(prompt):
            raise RuntimeError("terminal gone")

        monkeypatch.setattr("builtins.input", broken)

        with pytest.raises(RuntimeError):
            shell.run(str(zero_file))
        assert not shell.editor.session.is_open


class TestHighlighting:
    """Tests for highlighted dump output."""

    def test_enabled_highlighter_adds_color(self, zero_file):
        out = io.StringIO()
        with HexEditor() as editor:
            shell = CommandShell(editor, DumpHighlighter(enabled=True), out=out)
            shell.handle_line(f"o {zero_file}")
            shell.handle_line("d 0 4")

        assert "\x1b[" in out.getvalue()


class TestPaths:
    """Tests for file names given to open."""

    def test_path_with_spaces(self, tmp_path):
        path = tmp_path / "my data.bin"
        path.write_bytes(b"\x01\x02")
        out = io.StringIO()

        with HexEditor() as editor:
            shell = CommandShell(editor, out=out)
            shell.handle_line(f"open {path}")
            shell.handle_line("i 0 n")

        assert out.getvalue().splitlines() == [f"{path} is open for editing...", "258"]
