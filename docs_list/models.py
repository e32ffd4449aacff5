"""Core data models shared across docs-list components."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

MISSING_FRONT_MATTER = "missing front matter"
UNTERMINATED_FRONT_MATTER = "unterminated front matter"
SUMMARY_KEY_MISSING = "summary key missing"
SUMMARY_IS_EMPTY = "summary is empty"

ERROR_REASONS = (
    MISSING_FRONT_MATTER,
    UNTERMINATED_FRONT_MATTER,
    SUMMARY_KEY_MISSING,
    SUMMARY_IS_EMPTY,
)


@dataclass
class Metadata:
    """Front-matter facts extracted from a single Markdown file.

    ``summary`` and ``error`` are never both set. ``read_when`` may still hold
    hints gathered before an error was detected.
    """

    summary: Optional[str] = None
    read_when: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass(frozen=True)
class InlineString:
    """Quoted item from an inline ``read_when`` array."""

    text: str


@dataclass(frozen=True)
class InlineNumber:
    """Numeric item, kept as the raw text it was written with."""

    raw: str


@dataclass(frozen=True)
class InlineBool:
    """``true`` or ``false`` item."""

    flag: bool


@dataclass(frozen=True)
class InlineNull:
    """``null`` item."""


InlineValue = Union[InlineString, InlineNumber, InlineBool, InlineNull]
