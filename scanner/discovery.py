"""File discovery utilities for scanning markdown trees."""

import logging
from pathlib import Path
from typing import Iterator

from .errors import WalkError

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def iter_markdown_files(root: Path) -> Iterator[Path]:
    """
    Iterate over markdown files in a directory tree.

    The walk is depth-first in lexical order. Symlinked directories are not
    descended into. A file is selected when its name ends in ``.md``,
    compared case-sensitively.

    Args:
        root: Root directory to scan.

    Yields:
        Paths of matching files, rooted at ``root`` as given.

    Raises:
        WalkError: If ``root`` is not a directory or a listing fails.
    """
    if not root.is_dir():
        raise WalkError(f"'{root}' is not a directory")

    def _walk(current: Path) -> Iterator[Path]:
        try:
            entries = sorted(current.iterdir())
        except OSError as e:
            raise WalkError(f"cannot list {current}: {e}") from e

        for entry in entries:
            if entry.is_dir():
                if entry.is_symlink():
                    logger.debug("skipping symlinked directory %s", entry)
                    continue
                yield from _walk(entry)
            elif entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX):
                yield entry

    yield from _walk(root)
