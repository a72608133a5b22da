"""Error types raised by pylinkval.

Only the operations that accept structure from the caller can fail: URL
parsing, reference resolution and caller-supplied patterns. The format
validators never raise; a malformed value simply does not validate.
"""


class LinkvalError(ValueError):
    """Base class for all errors raised by pylinkval.

    Attributes:
        detail (str): The underlying reason, without the message prefix.
    """

    prefix = "Error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class ParseError(LinkvalError):
    """Raised when a string is not a structurally valid URL."""

    prefix = "Invalid URL"


class JoinError(LinkvalError):
    """Raised when a relative reference cannot be resolved against a base."""

    prefix = "Failed to join URLs"


class InvalidBaseError(JoinError):
    """The base URL given to `join` does not parse."""

    prefix = "Invalid base URL"


class InvalidRelativeError(JoinError):
    """The resolved reference does not form a valid URL."""


class PatternError(LinkvalError):
    """Raised when a caller-supplied regular expression does not compile."""

    prefix = "Invalid regex pattern"
