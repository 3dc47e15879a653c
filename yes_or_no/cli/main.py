"""
Main CLI entry point for yes-or-no.

Asks a single question and reports the answer through stdout and the exit code.
"""

import argparse
import logging
import sys

from rich.console import Console

from yes_or_no import __version__

from ..exceptions import TerminalError
from .._prompt import PromptStyle, prompt
from .util import CANCELLED_EXIT, IO_ERROR_EXIT, _print_cancelled, graceful_main

YES_EXIT = 0
NO_EXIT = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yes-or-no",
        description="Ask a yes/no question in the terminal",
        epilog=(
            "Keys: ←/→ select, Enter confirm, Esc answer no, Ctrl-C cancel.\n"
            f"Exit codes: {YES_EXIT} yes, {NO_EXIT} no, {CANCELLED_EXIT} cancelled, "
            f"{IO_ERROR_EXIT} terminal error."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("question", help="Question to ask")
    parser.add_argument(
        "--default",
        choices=["yes", "no"],
        default="yes",
        help="Answer highlighted when the prompt opens (default: yes)",
    )
    parser.add_argument(
        "--ascii", action="store_true", help="Use 'x' instead of '✓' for the selected box"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only report the answer through the exit code"
    )
    parser.add_argument(
        "--log-file",
        help="Write debug logs to this file (the screen is taken by the prompt)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(log_file: str | None) -> logging.Handler | None:
    """Send the package's debug logs to ``log_file``; stderr is hidden behind the prompt."""
    if not log_file:
        return None
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    package_logger = logging.getLogger("yes_or_no")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler


def _real_main(argv: list[str], console: Console | None = None) -> int:
    """Parse arguments, run the prompt and map the outcome to an exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)
    console = console or Console(highlight=False)

    style = PromptStyle.ascii() if args.ascii else PromptStyle()
    try:
        answer = prompt(args.question, args.default == "yes", style=style)
    except TerminalError as e:
        sys.stderr.write(f"❌ {e}\n")
        return IO_ERROR_EXIT

    if answer is None:
        _print_cancelled()
        return CANCELLED_EXIT

    if not args.quiet:
        console.print("yes" if answer else "no")
    return YES_EXIT if answer else NO_EXIT


def main() -> None:
    """Main CLI entry point with graceful interrupt handling."""
    code = graceful_main(_real_main, sys.argv[1:])
    raise SystemExit(code)


if __name__ == "__main__":
    main()
