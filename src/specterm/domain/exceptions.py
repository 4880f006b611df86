"""Domain exceptions: all public errors of specterm.

Reporting never raises for malformed report data. What surfaces to the
caller is bad configuration and output sink failures.
"""


class SpecTermError(Exception):
    """Base for all specterm exceptions.

    Allows: except SpecTermError to catch all library errors.
    """


class StyleSpecError(SpecTermError, ValueError):
    """Style specification contains an unknown token.

    Attributes:
        spec: Full style specification.
        token: Offending token.
    """

    def __init__(self, *, spec: str, token: str) -> None:
        """Initialize with specification and offending token."""
        self.spec = spec
        self.token = token
        super().__init__(f"unknown style token {token!r} in {spec!r}")


class OutputStreamError(SpecTermError, OSError):
    """Writing to or releasing the output sink failed.

    The original OSError is chained via __cause__.
    """


class WriterClosedError(SpecTermError, RuntimeError):
    """Write attempted after the writer released its sink."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("writer is closed")
