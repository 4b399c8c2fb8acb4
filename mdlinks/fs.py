"""Filesystem access: path checks, recursive file listing and document reads.

Classification uses ``lstat`` so symbolic links are never followed while
walking a tree.  A symlink is neither a file nor a directory here, which means
:func:`collect_files` skips it and cannot loop on a symlink cycle.
"""

from __future__ import annotations

import asyncio
import os
import stat
from typing import List, Optional

from mdlinks.errors import ReadFailure

MARKDOWN_SUFFIX = ".md"


# ---------------------------------------------------------------------------
# Path classification
# ---------------------------------------------------------------------------

def path_exists(path: str) -> bool:
    """Return ``True`` if *path* exists; any access error counts as missing."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def _lstat_mode(path: str) -> int:
    return os.lstat(path).st_mode


def is_directory(path: str) -> bool:
    return stat.S_ISDIR(_lstat_mode(path))


def is_file(path: str) -> bool:
    return stat.S_ISREG(_lstat_mode(path))


def is_markdown_file(path: str) -> bool:
    """Return ``True`` if *path* ends with the ``.md`` suffix (case-sensitive)."""
    return path.endswith(MARKDOWN_SUFFIX)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def collect_files(source_path: str, files: Optional[List[str]] = None) -> List[str]:
    """Recursively list every regular file beneath *source_path*.

    Depth-first: a subdirectory's files are appended before the directory's
    remaining siblings.  Entries are visited in sorted name order so repeated
    runs over the same tree give the same list.

    Args:
        source_path: Directory to walk.
        files: Accumulator the results are appended to (created if omitted).

    Returns:
        The accumulator, each path joined onto *source_path*.

    Raises:
        ReadFailure: If a directory cannot be listed or an entry vanishes
            before it can be classified.
    """
    if files is None:
        files = []

    try:
        entries = sorted(os.listdir(source_path))
    except OSError as exc:
        raise ReadFailure(source_path) from exc

    for entry in entries:
        full_path = os.path.join(source_path, entry)

        try:
            directory = is_directory(full_path)
            regular = not directory and is_file(full_path)
        except OSError as exc:
            raise ReadFailure(full_path) from exc

        if directory:
            collect_files(full_path, files)
        elif regular:
            files.append(full_path)

    return files


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def read_document(path: str) -> str:
    """Read *path* as UTF-8 text.

    Raises:
        ReadFailure: If the file cannot be opened or decoded.  The original
            ``OSError`` / ``UnicodeDecodeError`` is chained as ``__cause__``.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailure(path) from exc


async def read_document_async(path: str) -> str:
    """Run :func:`read_document` in a worker thread."""
    return await asyncio.to_thread(read_document, path)
