"""Defaults and options shared by metrics and text summaries."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidOptionsError

# The default `p` for p-norms is 2 (Euclidean norm).
DEFAULT_P = 2

DEFAULT_SIGNIFICANT_DIGITS = 3
INDENT_WIDTH = 2


@dataclass(frozen=True)
class TextSummaryOptions:
    """Options for plain text summaries.

    Attributes:
        significant_digits: Real numbers are rounded to this many significant
            digits before printing.
        indent: Number of spaces added per nesting level.
    """

    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS
    indent: int = INDENT_WIDTH

    def __post_init__(self) -> None:
        if self.significant_digits < 1:
            raise InvalidOptionsError(
                "significant_digits must be at least 1.",
                context={"significant_digits": self.significant_digits},
            )
        if self.indent < 0:
            raise InvalidOptionsError("indent cannot be negative.", context={"indent": self.indent})


__all__ = ["DEFAULT_P", "DEFAULT_SIGNIFICANT_DIGITS", "INDENT_WIDTH", "TextSummaryOptions"]
