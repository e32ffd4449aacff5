"""CLI entrypoint for the docs-list command."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from .config import ConfigError, DocsListConfig, load_config
from .frontmatter import extract_metadata
from .logging import configure_logging, get_logger
from .report import ReportWriter
from .walker import walk_markdown_files

MISSING_DOCS_MESSAGE = "docs:list: missing docs directory. Run from repo root."
NOT_A_DIRECTORY_MESSAGE = "docs:list: docs path is not a directory."

logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-list",
        description=(
            "List markdown files under ./docs with their front-matter summary "
            "and read_when hints."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None, *, stdout: TextIO | None = None) -> None:
    """CLI entrypoint for docs-list."""
    parser = _build_parser()
    # Positional arguments are not used; stray ones are ignored.
    args, extras = parser.parse_known_args(argv)

    configure_logging(verbose=bool(args.verbose))
    if extras:
        logger.debug("Ignoring extra arguments: %s", " ".join(extras))

    stream = stdout if stdout is not None else sys.stdout
    root = Path.cwd()
    docs_dir = root / "docs"
    if not docs_dir.exists():
        parser.exit(1, f"{MISSING_DOCS_MESSAGE}\n")
    if not docs_dir.is_dir():
        parser.exit(1, f"{NOT_A_DIRECTORY_MESSAGE}\n")

    try:
        config = load_config(root)
        list_docs(config, stream)
    except ConfigError as exc:
        parser.exit(1, f"docs:list: {exc}\n")
    except BrokenPipeError:
        # Reader closed the pipe early, e.g. `docs-list | head`.
        _discard_stdout(stream)
    except (OSError, UnicodeDecodeError) as exc:
        parser.exit(1, f"{exc}\n")


def list_docs(config: DocsListConfig, stream: TextIO) -> None:
    """Walk the docs tree and stream the inventory report to ``stream``."""
    if config.source is not None:
        logger.debug("Loaded configuration from %s", config.source)

    docs_dir = config.docs_dir
    report = ReportWriter(stream, reminder=config.reminder)
    report.write_header()

    relative_paths = walk_markdown_files(docs_dir, excluded_dirs=config.exclude_dirs)
    logger.debug("Found %d markdown files under %s", len(relative_paths), docs_dir)
    for relative_path in relative_paths:
        metadata = extract_metadata(docs_dir / relative_path)
        report.write_entry(relative_path, metadata)
    report.write_footer()


def _discard_stdout(stream: TextIO) -> None:
    if stream is not sys.stdout:
        return
    # Point fd 1 at devnull so the interpreter's final flush cannot fail again.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


if __name__ == "__main__":
    main(sys.argv[1:])
