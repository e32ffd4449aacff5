"""Front-matter extraction for documentation files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .logging import get_logger
from .models import (
    MISSING_FRONT_MATTER,
    SUMMARY_IS_EMPTY,
    SUMMARY_KEY_MISSING,
    UNTERMINATED_FRONT_MATTER,
    InlineBool,
    InlineNull,
    InlineNumber,
    InlineString,
    InlineValue,
    Metadata,
)

_MARKER = "---"
_CLOSING_MARKER = "\n---"
_SUMMARY_KEY = "summary:"
_READ_WHEN_KEY = "read_when:"
_HINT_PREFIX = "- "
_QUOTES = ('"', "'")

logger = get_logger("frontmatter")


class FrontMatterScanner:
    """Line scanner for the body of a front-matter block.

    The scanner has two states: idle and collecting ``read_when`` hints.
    A ``read_when:`` line switches collection on even when it carries an
    inline array, so inline and block entries can mix under one key.
    """

    def __init__(self) -> None:
        self.summary_line: Optional[str] = None
        self.read_when: List[str] = []
        self.collecting_read_when = False

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()

        if line.startswith(_SUMMARY_KEY):
            self.summary_line = line
            self.collecting_read_when = False
            return

        if line.startswith(_READ_WHEN_KEY):
            self.collecting_read_when = True
            values = parse_inline_read_when(line[len(_READ_WHEN_KEY):].strip())
            if values is not None:
                self.read_when.extend(compact_strings(values))
            return

        if not self.collecting_read_when:
            return

        if line.startswith(_HINT_PREFIX):
            hint = line[len(_HINT_PREFIX):].strip()
            if hint:
                self.read_when.append(hint)
        elif line:
            self.collecting_read_when = False

    def scan(self, lines: Iterable[str]) -> "FrontMatterScanner":
        for line in lines:
            self.feed(line)
        return self


def extract_metadata(path: Path) -> Metadata:
    """Read ``path`` and extract its front-matter metadata.

    I/O and decoding errors propagate; malformed front matter is reported
    through ``Metadata.error``.
    """
    # newline="" keeps \r\n intact so marker offsets match the raw file.
    with path.open("r", encoding="utf-8", newline="") as handle:
        content = handle.read()
    metadata = parse_front_matter(content)
    if metadata.error:
        logger.debug("%s: %s", path, metadata.error)
    return metadata


def parse_front_matter(content: str) -> Metadata:
    """Parse the front matter at the top of ``content``."""
    if not content.startswith(_MARKER):
        return Metadata(error=MISSING_FRONT_MATTER)

    end_index = content.find(_CLOSING_MARKER, len(_MARKER))
    if end_index == -1:
        return Metadata(error=UNTERMINATED_FRONT_MATTER)

    block = content[len(_MARKER):end_index].strip()
    scanner = FrontMatterScanner().scan(block.split("\n"))

    if scanner.summary_line is None:
        return Metadata(read_when=scanner.read_when, error=SUMMARY_KEY_MISSING)

    summary = normalize_summary(scanner.summary_line[len(_SUMMARY_KEY):])
    if not summary:
        return Metadata(read_when=scanner.read_when, error=SUMMARY_IS_EMPTY)

    return Metadata(summary=summary, read_when=scanner.read_when)


def normalize_summary(value: str) -> str:
    """Strip one leading and one trailing quote, then collapse whitespace."""
    normalized = value.strip()
    if normalized.startswith(_QUOTES):
        normalized = normalized[1:]
    if normalized.endswith(_QUOTES):
        normalized = normalized[:-1]
    return " ".join(normalized.split())


def compact_strings(values: Iterable[InlineValue]) -> List[str]:
    """Convert inline values to hint strings, dropping nulls and blanks."""
    result: List[str] = []
    for value in values:
        if isinstance(value, InlineString):
            normalized = value.text.strip()
        elif isinstance(value, InlineNumber):
            normalized = value.raw.strip()
        elif isinstance(value, InlineBool):
            normalized = "true" if value.flag else "false"
        else:
            normalized = ""
        if normalized:
            result.append(normalized)
    return result


def parse_inline_read_when(inline: str) -> Optional[List[InlineValue]]:
    """Parse ``[a, b, ...]``; return None when the text is not a valid array."""
    if not (inline.startswith("[") and inline.endswith("]")):
        return None

    raw_items = split_inline_array_items(inline[1:-1])
    if raw_items is None:
        return None

    items: List[InlineValue] = []
    for raw_item in raw_items:
        value = parse_inline_value(raw_item.strip())
        if value is None:
            return None
        items.append(value)
    return items


def split_inline_array_items(text: str) -> Optional[List[str]]:
    """Split on commas that sit outside quoted substrings.

    Backslash escapes are honoured inside quotes only. Returns None for an
    unterminated quote, a dangling escape or an empty item.
    """
    if not text.strip():
        return []

    items: List[str] = []
    current: List[str] = []
    quote: Optional[str] = None
    escape = False

    for char in text:
        if quote is not None:
            current.append(char)
            if escape:
                escape = False
            elif char == "\\":
                escape = True
            elif char == quote:
                quote = None
            continue

        if char in _QUOTES:
            quote = char
            current.append(char)
        elif char == ",":
            items.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    if quote is not None or escape:
        return None

    items.append("".join(current).strip())
    if any(not item for item in items):
        return None
    return items


def parse_inline_value(value: str) -> Optional[InlineValue]:
    """Classify one inline array item, or return None if it is not a scalar."""
    if value == "null":
        return InlineNull()
    if value == "true":
        return InlineBool(True)
    if value == "false":
        return InlineBool(False)

    for quote in _QUOTES:
        if value.startswith(quote) and value.endswith(quote):
            return InlineString(value[1:-1] if len(value) >= 2 else "")

    if _is_float_literal(value):
        return InlineNumber(value)
    return None


def _is_float_literal(value: str) -> bool:
    # float() also takes digit-group underscores and non-ASCII digits; those
    # are not numbers here.
    if not value.isascii() or "_" in value:
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


__all__ = [
    "FrontMatterScanner",
    "compact_strings",
    "extract_metadata",
    "normalize_summary",
    "parse_front_matter",
    "parse_inline_read_when",
    "parse_inline_value",
    "split_inline_array_items",
]
