"""
Utility functions for CLI graceful handling.

Provides helpers for handling signals and cancellation gracefully.
"""

from __future__ import annotations

from collections.abc import Callable
import signal
import sys
from typing import Any

CANCELLED_EXIT = 130  # POSIX: 128 + SIGINT (2)
IO_ERROR_EXIT = 74  # sysexits.h: EX_IOERR


def _print_cancelled(msg: str = "✖ Cancelled by user") -> None:
    """Print cancellation message to stderr."""
    sys.stderr.write("\n" + msg + "\n")
    sys.stderr.flush()


def graceful_main(fn: Callable[[list[str]], int], argv: list[str]) -> int:
    """
    Run fn(argv) and handle Ctrl-C/SIGTERM nicely.

    The prompt itself turns Ctrl-C into a cancellation while the terminal is
    in raw mode; this covers signals delivered outside of it.

    Args:
        fn: Function to run that takes argv and returns exit code
        argv: Command line arguments

    Returns:
        Exit code (130 for cancelled, or fn's return value)
    """

    # Handle SIGTERM like Ctrl-C
    def _term(_signum: int, _frame: Any) -> None:
        raise KeyboardInterrupt()

    old_term = signal.getsignal(signal.SIGTERM)
    signal.signal(signal.SIGTERM, _term)

    try:
        return int(fn(argv) or 0)
    except KeyboardInterrupt:
        _print_cancelled()
        return CANCELLED_EXIT
    finally:
        signal.signal(signal.SIGTERM, old_term)
