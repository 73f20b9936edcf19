"""
Exceptions raised while reading input.gacode files.

Every GacodeParseError means parsing cannot continue: the reader stops at
the first one and discards the partially filled container.
"""

from dataclasses import dataclass, field
from typing import Optional


class GacodeError(Exception):
    """Base class for gacode_reader errors."""


class GacodeParseError(GacodeError):
    """Fatal error while parsing an input.gacode stream."""


@dataclass
class MissingHeaderError(GacodeParseError):
    """Raised when the stream ends before the sizing directives were seen.

    Attributes:
        fields: Every missing sizing directive (e.g. ['nexp', 'nion'])
    """
    fields: list[str] = field(default_factory=list)

    def __post_init__(self):
        super().__init__(self.fields)

    def __str__(self) -> str:
        return "No specification of " + " and ".join(self.fields)


@dataclass
class DirectiveBodyError(GacodeParseError):
    """Raised when a directive body is short or holds an unreadable token.

    Attributes:
        directive: Name of the directive being read (e.g. 'z')
        expected: Number of tokens the body requires
        found: Number of tokens read before the failure
        line_number: Line of the directive in the source, if known
        reason: Extra detail for malformed tokens
    """
    directive: str
    expected: int
    found: int
    line_number: Optional[int] = None
    reason: Optional[str] = None

    def __post_init__(self):
        super().__init__(self.directive, self.expected, self.found, self.line_number, self.reason)

    def __str__(self) -> str:
        where = f" (line {self.line_number})" if self.line_number else ""
        if self.reason:
            return f"Invalid line for {self.directive}{where}: {self.reason}"
        return (
            f"Invalid line for {self.directive}{where}: "
            f"expected {self.expected} tokens, found {self.found}"
        )
