"""Terminal reporter configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import IO, Any


@dataclass(frozen=True, slots=True)
class TerminalConfig:
    """Configuration for terminal reporters.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        colors: Emit ANSI styling. False = plain text.
        header: Print banner and working directory at run start.
        output: Sink (text or binary stream). None = own handle on stdout.
        indent_value: Text repeated once per indentation level.
        dots_per_line: Glyphs per line for the dot reporter.
    """

    colors: bool = True
    header: bool = True
    output: IO[Any] | None = None
    indent_value: str = "  "
    dots_per_line: int = 80

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.dots_per_line < 1:
            raise ValueError(f"dots_per_line must be >= 1, got {self.dots_per_line}")
        if "\n" in self.indent_value:
            raise ValueError("indent_value must not contain line breaks")

    @classmethod
    def from_env(cls, **overrides: Any) -> TerminalConfig:
        """Build config honouring NO_COLOR and FORCE_COLOR.

        Explicit overrides win over the environment.
        """
        config = cls(**overrides)
        if "colors" in overrides:
            return config
        if os.getenv("NO_COLOR"):
            return replace(config, colors=False)
        if os.getenv("FORCE_COLOR"):
            return replace(config, colors=True)
        return config
