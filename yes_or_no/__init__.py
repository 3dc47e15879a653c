"""
yes-or-no - a very simple yes or no terminal prompt

Navigate with the arrow keys, confirm with Enter, answer "No" with Escape
and cancel with Ctrl-C.
"""

__version__ = "0.1.0"

from .exceptions import TerminalError, YesOrNoError
from .keys import (
    Cancel,
    Confirm,
    Continue,
    InputEvent,
    KeyAction,
    KeyCode,
    KeyEvent,
    KeyEventKind,
    KeyModifiers,
    Selection,
    resolve,
)
from ._prompt import PromptStyle, prompt, render_line, yes_or_no
from .terminal import BlessedTerminal, Terminal, terminal_mode

__all__ = [
    "BlessedTerminal",
    "Cancel",
    "Confirm",
    "Continue",
    "InputEvent",
    "KeyAction",
    "KeyCode",
    "KeyEvent",
    "KeyEventKind",
    "KeyModifiers",
    "PromptStyle",
    "Selection",
    "Terminal",
    "TerminalError",
    "YesOrNoError",
    "prompt",
    "render_line",
    "resolve",
    "terminal_mode",
    "yes_or_no",
]
