"""
Terminal access for the prompt.

Provides:
- Terminal: the capabilities the prompt loop relies on
- BlessedTerminal: implementation backed by blessed
- terminal_mode: guard that enables raw mode and the alternate screen and
  always restores both
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Generator
import contextlib
import logging
import sys
from typing import IO

from blessed import Terminal as _BlessedTerminal
from blessed.keyboard import Keystroke

from .exceptions import TerminalError
from .keys import InputEvent, KeyCode, KeyEvent, KeyModifiers

logger = logging.getLogger(__name__)

# blessed switches raw mode through termios, whose errors are not OSError.
if sys.platform == "win32":
    _TERMIOS_ERRORS: tuple[type[Exception], ...] = ()
else:
    import termios

    _TERMIOS_ERRORS = (termios.error,)

_NAMED_KEYS = {
    "KEY_LEFT": KeyCode.LEFT,
    "KEY_RIGHT": KeyCode.RIGHT,
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_ESCAPE": KeyCode.ESCAPE,
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_TAB": KeyCode.TAB,
}

_PLAIN_KEYS = {
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\x1b": KeyCode.ESCAPE,
    "\t": KeyCode.TAB,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}


class Terminal(ABC):
    """
    Terminal capabilities used by the prompt loop.

    Implementations signal failures by raising OSError.
    """

    @abstractmethod
    def enable_raw_mode(self) -> None:
        """Deliver keystrokes unbuffered and unechoed."""

    @abstractmethod
    def disable_raw_mode(self) -> None:
        """Restore the terminal's previous input mode."""

    @abstractmethod
    def enter_alternate_screen(self) -> None:
        """Switch to the secondary screen buffer."""

    @abstractmethod
    def leave_alternate_screen(self) -> None:
        """Switch back to the primary screen buffer."""

    @abstractmethod
    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to column ``x``, row ``y``."""

    @abstractmethod
    def clear_line(self) -> None:
        """Clear from the cursor to the end of the line."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Queue text for output."""

    @abstractmethod
    def flush(self) -> None:
        """Write out everything queued so far."""

    @abstractmethod
    def read_event(self) -> InputEvent:
        """Block until the next input event arrives."""


def keystroke_to_event(keystroke: Keystroke) -> InputEvent:
    """
    Translate a blessed keystroke into an input event.

    An empty keystroke (the read returned without input) becomes a bare
    InputEvent, which the prompt loop ignores.
    """
    raw = str(keystroke)
    if not raw:
        return InputEvent(raw=raw)

    if keystroke.is_sequence and keystroke.name in _NAMED_KEYS:
        return KeyEvent(raw=raw, key=_NAMED_KEYS[keystroke.name])
    if raw in _PLAIN_KEYS:
        return KeyEvent(raw=raw, key=_PLAIN_KEYS[raw])
    if len(raw) == 1 and "\x01" <= raw <= "\x1a":
        # In raw mode Ctrl+letter arrives as the control character (^C == "\x03").
        return KeyEvent(raw=raw, key=chr(ord(raw) + 96), modifiers=KeyModifiers.CONTROL)
    if not keystroke.is_sequence and len(raw) == 1 and raw.isprintable():
        return KeyEvent(raw=raw, key=raw)
    return KeyEvent(raw=raw, key=KeyCode.OTHER)


class BlessedTerminal(Terminal):
    """Terminal implementation backed by ``blessed.Terminal``."""

    def __init__(self, term: _BlessedTerminal | None = None, stdin: IO[str] | None = None) -> None:
        self.term = term or _BlessedTerminal()
        # blessed reads keys from the process's original stdin.
        self._stdin = stdin if stdin is not None else sys.__stdin__
        self._raw_mode: contextlib.ExitStack | None = None

    def enable_raw_mode(self) -> None:
        if self._raw_mode is not None:
            return
        if not (self.term.is_a_tty and self._stdin is not None and self._stdin.isatty()):
            raise TerminalError.not_a_tty()
        stack = contextlib.ExitStack()
        try:
            stack.enter_context(self.term.raw())
        except _TERMIOS_ERRORS as e:
            raise OSError(*e.args) from e
        self._raw_mode = stack

    def disable_raw_mode(self) -> None:
        stack, self._raw_mode = self._raw_mode, None
        if stack is None:
            return
        try:
            stack.close()
        except _TERMIOS_ERRORS as e:
            raise OSError(*e.args) from e

    def enter_alternate_screen(self) -> None:
        self.write(self.term.enter_fullscreen)
        self.flush()

    def leave_alternate_screen(self) -> None:
        self.write(self.term.exit_fullscreen)
        self.flush()

    def move_to(self, x: int, y: int) -> None:
        self.write(self.term.move_xy(x, y))

    def clear_line(self) -> None:
        self.write(self.term.clear_eol)

    def write(self, text: str) -> None:
        self.term.stream.write(text)

    def flush(self) -> None:
        self.term.stream.flush()

    def read_event(self) -> InputEvent:
        return keystroke_to_event(self.term.inkey())


@contextlib.contextmanager
def terminal_mode(terminal: Terminal) -> Generator[Terminal, None, None]:
    """
    Enable raw mode and the alternate screen for the duration of the block.

    Both are restored exactly once however the block exits. If the alternate
    screen cannot be entered, raw mode is disabled before the error propagates.
    """
    terminal.enable_raw_mode()
    try:
        terminal.enter_alternate_screen()
    except BaseException:
        terminal.disable_raw_mode()
        raise
    logger.debug("Entered raw mode and alternate screen")

    try:
        yield terminal
    finally:
        try:
            terminal.leave_alternate_screen()
        except OSError:
            logger.warning("Failed to leave the alternate screen", exc_info=True)
            raise
        finally:
            terminal.disable_raw_mode()
            logger.debug("Restored terminal mode")
