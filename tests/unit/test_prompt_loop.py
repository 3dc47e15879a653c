"""Tests for the interactive prompt loop."""

import pytest

from tests.utils.assertions import assert_renders_before_reads, assert_terminal_restored
from tests.utils.factories import ctrl_c, key_event, key_events
from yes_or_no import _prompt as prompt_module
from yes_or_no._prompt import PromptStyle, prompt, render_line, yes_or_no
from yes_or_no.exceptions import TerminalError
from yes_or_no.keys import InputEvent, KeyCode, KeyEventKind, Selection


@pytest.mark.unit
class TestRenderLine:
    """Test cases for render_line()."""

    def test_yes_selected(self, question):
        assert render_line(question, Selection.YES) == f"{question} Yes [✓] No [ ]"

    def test_no_selected(self, question):
        assert render_line(question, Selection.NO) == f"{question} Yes [ ] No [✓]"

    def test_ascii_style(self, question):
        line = render_line(question, Selection.NO, PromptStyle.ascii())
        assert line == f"{question} Yes [ ] No [x]"

    def test_custom_marks(self):
        style = PromptStyle(checked="*", unchecked="-")
        assert render_line("Q?", Selection.YES, style) == "Q? Yes [*] No [-]"


@pytest.mark.unit
class TestPromptScenarios:
    """End-to-end key sequences against a scripted terminal."""

    @pytest.mark.parametrize(
        "initial, events, expected",
        [
            (True, key_events(KeyCode.RIGHT, KeyCode.ENTER), False),
            (False, key_events(KeyCode.LEFT, KeyCode.LEFT, KeyCode.ENTER), True),
            (True, key_events(KeyCode.ESCAPE), False),
            (False, key_events(KeyCode.ESCAPE), False),
            (True, [ctrl_c()], None),
            (False, [ctrl_c()], None),
            (True, key_events(KeyCode.UP, KeyCode.DOWN, KeyCode.ENTER), True),
            (False, key_events(KeyCode.ENTER), False),
            (True, key_events("y", "n", KeyCode.ENTER), True),
        ],
    )
    def test_key_sequence(self, make_terminal, question, initial, events, expected):
        terminal = make_terminal(events)

        assert prompt(question, initial, terminal=terminal) is expected
        assert terminal.events == []
        assert_terminal_restored(terminal)
        assert_renders_before_reads(terminal)

    def test_renders_each_selection(self, make_terminal, question):
        terminal = make_terminal(key_events(KeyCode.RIGHT, KeyCode.LEFT, KeyCode.ENTER))

        prompt(question, True, terminal=terminal)

        assert terminal.writes == [
            f"{question} Yes [✓] No [ ]",
            f"{question} Yes [ ] No [✓]",
            f"{question} Yes [✓] No [ ]",
        ]

    def test_uses_style(self, make_terminal):
        terminal = make_terminal(key_events(KeyCode.ENTER))

        prompt("Q?", False, terminal=terminal, style=PromptStyle.ascii())

        assert terminal.writes == ["Q? Yes [ ] No [x]"]

    def test_acquires_before_render_and_releases_last(self, make_terminal, question):
        terminal = make_terminal(key_events(KeyCode.ENTER))

        prompt(question, True, terminal=terminal)

        assert terminal.calls == [
            "enable_raw_mode",
            "enter_alternate_screen",
            "move_to",
            "clear_line",
            "write",
            "flush",
            "read_event",
            "leave_alternate_screen",
            "disable_raw_mode",
        ]

    def test_ignores_non_key_and_release_events(self, make_terminal, question):
        events = [
            InputEvent(raw=""),
            key_event(KeyCode.RIGHT, kind=KeyEventKind.RELEASE),
            key_event(KeyCode.ENTER),
        ]
        terminal = make_terminal(events)

        assert prompt(question, True, terminal=terminal) is True
        # Ignored events still cause a re-render before the next read.
        assert terminal.count("write") == 3
        assert_terminal_restored(terminal)

    def test_yes_or_no_alias(self, make_terminal, question):
        terminal = make_terminal(key_events(KeyCode.ENTER))

        assert yes_or_no(question, True, terminal=terminal) is True

    def test_defaults_to_blessed_terminal(self, monkeypatch, make_terminal, question):
        terminal = make_terminal(key_events(KeyCode.ENTER))
        monkeypatch.setattr(prompt_module, "BlessedTerminal", lambda: terminal)

        assert prompt(question) is True
        assert_terminal_restored(terminal)


@pytest.mark.unit
class TestPromptErrors:
    """The terminal is restored before any error reaches the caller."""

    @pytest.mark.parametrize("method", ["move_to", "clear_line", "write", "flush", "read_event"])
    def test_loop_failure_restores_terminal(self, make_terminal, question, method):
        original = OSError(5, "Input/output error")
        terminal = make_terminal(key_events(KeyCode.ENTER), fail_on={method: original})

        with pytest.raises(TerminalError) as exc_info:
            prompt(question, True, terminal=terminal)

        assert exc_info.value.code == "io_error"
        assert exc_info.value.details == {"errno": 5}
        assert exc_info.value.__cause__ is original
        assert_terminal_restored(terminal)

    def test_read_failure_after_renders(self, make_terminal, question):
        # The script runs out after one key; the next read fails.
        terminal = make_terminal(key_events(KeyCode.RIGHT))

        with pytest.raises(TerminalError):
            prompt(question, True, terminal=terminal)

        assert terminal.count("read_event") == 2
        assert_terminal_restored(terminal)

    def test_raw_mode_failure_leaves_nothing_engaged(self, make_terminal, question):
        terminal = make_terminal(fail_on={"enable_raw_mode": OSError("no tty")})

        with pytest.raises(TerminalError):
            prompt(question, True, terminal=terminal)

        assert terminal.calls == ["enable_raw_mode"]
        assert not terminal.raw_mode
        assert not terminal.alternate_screen

    def test_alternate_screen_failure_disables_raw_mode(self, make_terminal, question):
        terminal = make_terminal(fail_on={"enter_alternate_screen": OSError("smcup failed")})

        with pytest.raises(TerminalError):
            prompt(question, True, terminal=terminal)

        assert terminal.calls == ["enable_raw_mode", "enter_alternate_screen", "disable_raw_mode"]
        assert not terminal.raw_mode

    def test_leave_failure_still_disables_raw_mode(self, make_terminal, question):
        terminal = make_terminal(
            key_events(KeyCode.ENTER), fail_on={"leave_alternate_screen": OSError("rmcup failed")}
        )

        with pytest.raises(TerminalError):
            prompt(question, True, terminal=terminal)

        assert terminal.count("disable_raw_mode") == 1
        assert not terminal.raw_mode

    def test_terminal_error_passes_through(self, make_terminal, question):
        error = TerminalError.not_a_tty()
        terminal = make_terminal(fail_on={"enable_raw_mode": error})

        with pytest.raises(TerminalError) as exc_info:
            prompt(question, True, terminal=terminal)

        assert exc_info.value is error

    def test_keyboard_interrupt_restores_terminal(self, make_terminal, question):
        terminal = make_terminal(fail_on={"read_event": KeyboardInterrupt()})

        with pytest.raises(KeyboardInterrupt):
            prompt(question, True, terminal=terminal)

        assert_terminal_restored(terminal)
