"""
Exception classes for yes-or-no.
"""


class YesOrNoError(Exception):
    """Base exception for all yes-or-no errors."""

    def __init__(self, message: str, code: str | None = None, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class TerminalError(YesOrNoError):
    """Raised when interacting with the terminal fails."""

    @classmethod
    def not_a_tty(cls) -> "TerminalError":
        """Create error for a process that is not attached to a terminal."""
        message = (
            "Standard input and output must be a terminal.\n"
            "  • Run the prompt from an interactive shell\n"
            "  • Do not pipe or redirect stdin/stdout"
        )
        return cls(message, code="not_a_tty")

    @classmethod
    def from_os_error(cls, exc: OSError) -> "TerminalError":
        """Wrap an I/O failure raised by the terminal layer."""
        reason = exc.strerror or str(exc) or type(exc).__name__
        return cls(f"Terminal I/O failed: {reason}", code="io_error", details={"errno": exc.errno})
