"""Terminal output helpers: coloured messages, a spinner and a progress bar."""

from __future__ import annotations

import os
import sys
import threading

_STYLE_CODES = {
    "bold": "1",
    "red": "31",
    "green": "32",
    "blue": "34",
}

_RESET = "\x1b[0m"
_BAR_WIDTH = 60


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    if "NO_COLOR" in os.environ:
        return False
    forced = os.environ.get("CLICOLOR_FORCE")
    if forced is not None and forced != "0":
        return True
    return sys.stdout.isatty()


def styled(text, *args) -> str:
    """Wrap ``text`` in ANSI codes for the named styles, if colour is enabled."""
    codes = []
    for name in args:
        try:
            codes.append(_STYLE_CODES[name])
        except KeyError:
            raise ValueError(f"unknown style: {name!r}") from None
    text = str(text)
    if not codes or not _colors_enabled():
        return text
    prefix = "".join(f"\x1b[{code}m" for code in codes)
    return f"{prefix}{text}{_RESET}"


def warn(message: str) -> None:
    """Print a warning in red, prefixed by a warning sign."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{styled(symbol, 'red')} {styled(message, 'red')}")


def success(message: str) -> None:
    """Print a success message in green, prefixed by a check mark."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{styled(symbol, 'green')} {styled(message, 'green')}")


class Spinner:
    """A spinner with a message, animated on stderr while it is a terminal."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈ "
    _TICK = 0.1

    def __init__(self, message: str):
        self.message = message
        self.finished = False
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        if sys.stderr.isatty():
            self._thread = threading.Thread(target=self._animate, daemon=True)
            self._thread.start()

    def _animate(self) -> None:
        frame = 0
        while not self._stop.is_set():
            with self._lock:
                symbol = self._FRAMES[frame % len(self._FRAMES)]
                sys.stderr.write(f"\r\x1b[2K{symbol} {self.message}")
                sys.stderr.flush()
            frame += 1
            self._stop.wait(self._TICK)

    def set_message(self, message: str) -> None:
        """Change the text shown next to the spinner."""
        with self._lock:
            self.message = message

    def finish_and_clear(self) -> None:
        """Stop the spinner and erase its line."""
        if self.finished:
            return
        self.finished = True
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            sys.stderr.write("\r\x1b[2K")
            sys.stderr.flush()

    def __enter__(self) -> "Spinner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()


class ProgressBar:
    """A textual progress bar counting finished exercises."""

    def __init__(self, total: int, position: int = 0):
        self.total = total
        self.position = position

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 100.0
        return self.position / self.total * 100.0

    def advance(self) -> None:
        """Move the bar one step forward."""
        self.position += 1

    def render(self) -> str:
        """Return the bar as one line of text."""
        fraction = 1.0 if self.total == 0 else min(self.position / self.total, 1.0)
        fill = int(fraction * _BAR_WIDTH)
        head = 1 if fraction > 0.0 and fill < _BAR_WIDTH else 0
        rest = _BAR_WIDTH - fill - head
        done_part = styled("#" * fill, "green") if fill else ""
        todo_part = styled(">" * head + "-" * rest, "red") if head + rest else ""
        return (
            f"Progress: [{done_part}{todo_part}] "
            f"{self.position}/{self.total} ({self.percentage:.1f} %)"
        )