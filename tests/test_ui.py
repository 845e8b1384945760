import io
import sys
import time

from exlings import ui


class _TtyStream(io.StringIO):
    def isatty(self):
        return True


def test_no_emoji_reads_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("careful")
    assert capsys.readouterr().out == "⚠️  careful\n"


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("careful")
    assert capsys.readouterr().out == "! careful\n"


def test_success_with_and_without_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("all good")
    assert capsys.readouterr().out.startswith("✅ all good")
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("all good")
    assert capsys.readouterr().out.startswith("✓ all good")


def test_styles_are_plain_without_terminal(capsys):
    assert ui.bold("text") == "text"
    assert ui.blue("text") == "text"


def test_styles_use_escape_codes_on_terminal(monkeypatch):
    monkeypatch.setattr(sys, "stdout", _TtyStream())
    assert ui.bold("x") == "\x1b[1mx\x1b[0m"
    styled = ui.blue("x")
    assert styled.startswith("\x1b[") and styled.endswith("\x1b[0m")
    assert "x" in styled


def test_spinner_without_terminal_tracks_message():
    with ui.Spinner("Compiling a.rs...") as spinner:
        spinner.set_message("Running a.rs...")
        spinner.finish_and_clear()
        spinner.finish_and_clear()
    assert spinner.message == "Running a.rs..."


def test_spinner_on_terminal_draws_and_clears(monkeypatch):
    stream = _TtyStream()
    monkeypatch.setattr(sys, "stderr", stream)
    with ui.Spinner("Compiling a.rs..."):
        time.sleep(0.05)
    output = stream.getvalue()
    assert "Compiling a.rs..." in output
    assert output.endswith("\r\x1b[2K")