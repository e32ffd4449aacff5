"""Directory walking for Markdown documentation trees."""

from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, List

from .logging import get_logger

DEFAULT_EXCLUDED_DIRS = frozenset({"archive", "research"})
MARKDOWN_SUFFIX = ".md"

logger = get_logger("walker")


def walk_markdown_files(
    root: Path, *, excluded_dirs: AbstractSet[str] = DEFAULT_EXCLUDED_DIRS
) -> List[str]:
    """Return slash-separated paths of Markdown files under ``root``, sorted.

    Hidden entries and directories named in ``excluded_dirs`` are skipped at
    any depth. Symbolic links are neither followed nor listed.
    """
    return _walk(root, root, excluded_dirs)


def _walk(directory: Path, base: Path, excluded_dirs: AbstractSet[str]) -> List[str]:
    files: List[str] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            name = entry.name
            if name.startswith("."):
                continue

            full_path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                if name in excluded_dirs:
                    logger.debug("Skipping excluded directory %s", full_path)
                    continue
                files.extend(_walk(full_path, base, excluded_dirs))
            elif entry.is_file(follow_symlinks=False) and name.endswith(MARKDOWN_SUFFIX):
                files.append(full_path.relative_to(base).as_posix())

    files.sort()
    return files


__all__ = ["DEFAULT_EXCLUDED_DIRS", "MARKDOWN_SUFFIX", "walk_markdown_files"]
