"""Plain-text inventory report for documentation files."""

from __future__ import annotations

from typing import TextIO

from .models import Metadata

HEADER = "Listing all markdown files in docs folder:"
REMINDER = (
    "Reminder: keep docs up to date as behavior changes. When your task matches "
    'any "Read when" hint above (cache directives, database work, tests, etc.), '
    "read that doc before coding, and suggest new coverage when it is missing."
)


class ReportWriter:
    """Streams one report line (plus optional hint line) per documentation file."""

    def __init__(self, stream: TextIO, *, reminder: str = REMINDER) -> None:
        self._stream = stream
        self._reminder = reminder

    def write_header(self) -> None:
        self._writeln(HEADER)

    def write_entry(self, relative_path: str, metadata: Metadata) -> None:
        if metadata.summary is not None:
            self._writeln(f"{relative_path} - {metadata.summary}")
            if metadata.read_when:
                self._writeln(f"  Read when: {'; '.join(metadata.read_when)}")
            return

        reason = f" - [{metadata.error}]" if metadata.error else ""
        self._writeln(f"{relative_path}{reason}")

    def write_footer(self) -> None:
        self._writeln("")
        self._writeln(self._reminder)
        self._stream.flush()

    def _writeln(self, line: str) -> None:
        self._stream.write(line + "\n")


__all__ = ["HEADER", "REMINDER", "ReportWriter"]
