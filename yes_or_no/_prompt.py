"""
Interactive yes/no prompt.

Renders ``<question> Yes [✓] No [ ]`` on the first line of the alternate
screen and updates it in place until the user confirms or cancels.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .exceptions import TerminalError
from .keys import Cancel, Confirm, Continue, KeyEvent, KeyEventKind, Selection, resolve
from .terminal import BlessedTerminal, Terminal, terminal_mode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptStyle:
    """Checkbox marks used when rendering the prompt line."""

    checked: str = "✓"
    unchecked: str = " "

    @classmethod
    def ascii(cls) -> PromptStyle:
        """Style for terminals that cannot display the check mark."""
        return cls(checked="x")


def render_line(question: str, selection: Selection, style: PromptStyle | None = None) -> str:
    """Render the single prompt line for the current selection."""
    style = style or PromptStyle()
    yes_mark = style.checked if selection is Selection.YES else style.unchecked
    no_mark = style.checked if selection is Selection.NO else style.unchecked
    return f"{question} Yes [{yes_mark}] No [{no_mark}]"


def prompt(
    question: str,
    initial: bool = True,
    *,
    terminal: Terminal | None = None,
    style: PromptStyle | None = None,
) -> bool | None:
    """
    Ask a yes/no question in the terminal.

    Left/Right move the highlight, Enter confirms it, Escape answers "No" and
    Ctrl-C cancels. The terminal is always restored before this returns or
    raises.

    Args:
        question: Text shown before the choices
        initial: Whether "Yes" is highlighted at first
        terminal: Terminal to drive (defaults to the process's own terminal)
        style: Checkbox marks to render

    Returns:
        True for "Yes", False for "No", None if the user cancelled

    Raises:
        TerminalError: If reading from or writing to the terminal fails
    """
    terminal = terminal or BlessedTerminal()
    style = style or PromptStyle()
    selection = Selection.from_bool(initial)

    try:
        with terminal_mode(terminal):
            while True:
                terminal.move_to(0, 0)
                terminal.clear_line()
                terminal.write(render_line(question, selection, style))
                terminal.flush()

                event = terminal.read_event()
                if not isinstance(event, KeyEvent) or event.kind is not KeyEventKind.PRESS:
                    continue

                action = resolve(event.key, event.modifiers, selection)
                logger.debug("Key %r resolved to %s", event.raw, action)

                if isinstance(action, Confirm):
                    return action.selection.as_bool()
                if isinstance(action, Cancel):
                    return None
                if isinstance(action, Continue):
                    selection = action.selection
    except OSError as e:
        raise TerminalError.from_os_error(e) from e


# Alias named after the package.
yes_or_no = prompt
