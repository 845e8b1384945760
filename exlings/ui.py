"""Terminal output helpers: coloured status lines and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_RED = "\x1b[31m"
_GREEN = "\x1b[32m"
_BLUE = "\x1b[34m"
_CLEAR_LINE = "\r\x1b[2K"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _style(text: str, code: str) -> str:
    if not _is_tty(sys.stdout):
        return text
    return f"{code}{text}{_RESET}"


def bold(text: str) -> str:
    """Render text in bold when stdout is a terminal."""
    return _style(text, _BOLD)


def blue(text: str) -> str:
    """Render text in blue when stdout is a terminal."""
    return _style(text, _BLUE)


def _red(text: str) -> str:
    return _style(text, _RED)


def _green(text: str) -> str:
    return _style(text, _GREEN)


def warn(message: str) -> None:
    """Print a warning line in red."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{_red(marker)} {_red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{_green(marker)} {_green(message)}")


class Spinner:
    """A spinner drawn on stderr while work is in progress.

    Nothing is drawn when stderr is not a terminal.
    """

    TICKS = "⠁⠂⠄⡀⢀⠠⠐⠈"
    INTERVAL = 0.1

    def __init__(self, message: str):
        self.message = message
        self._stream = sys.stderr
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if _is_tty(self._stream):
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    def _spin(self) -> None:
        for tick in itertools.cycle(self.TICKS):
            with self._lock:
                self._stream.write(f"{_CLEAR_LINE}{tick} {self.message}")
                self._stream.flush()
            if self._stop.wait(self.INTERVAL):
                return

    def set_message(self, message: str) -> None:
        """Change the text shown next to the spinner."""
        with self._lock:
            self.message = message

    def finish_and_clear(self) -> None:
        """Stop the spinner and erase its line; safe to call repeatedly."""
        if self._stop.is_set():
            return
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._stream.write(_CLEAR_LINE)
            self._stream.flush()

    def __enter__(self) -> "Spinner":
        return self

    def __exit__(self, *args) -> None:
        self.finish_and_clear()