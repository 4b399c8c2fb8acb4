"""mdlinks pipeline.

``md_links`` takes a file or directory path to a result:

    resolve → collect files → keep .md documents → read + extract per file
    → validate (optional) → aggregate (optional)

Per-file work runs concurrently; results are flattened in file order, and
within each file in extraction order.
"""

from __future__ import annotations

import asyncio
import os
import sys
from typing import List, Optional

import httpx

from mdlinks.config import settings
from mdlinks.errors import NoDocumentsFound, PathNotFound
from mdlinks.extractor import extract_links
from mdlinks.fs import (
    collect_files,
    is_directory,
    is_markdown_file,
    path_exists,
    read_document_async,
)
from mdlinks.models import Link, MdLinksResult, Options, RawLinks, ValidatedLinks
from mdlinks.stats import aggregate
from mdlinks.validator import make_client, validate_links


def _log(message: str) -> None:
    if settings.verbose:
        print(message, file=sys.stderr)


def find_documents(raw_path: str) -> List[str]:
    """Resolve *raw_path* and return the Markdown documents it covers.

    Raises:
        PathNotFound: If the resolved path does not exist.
        NoDocumentsFound: If it exists but holds no ``.md`` file.
    """
    user_path = os.path.abspath(raw_path)

    if not path_exists(user_path):
        raise PathNotFound(user_path)

    candidates = collect_files(user_path) if is_directory(user_path) else [user_path]
    documents = [path for path in candidates if is_markdown_file(path)]
    _log(f"[COLLECTING] {len(documents)} document(s) of {len(candidates)} file(s) under {user_path}")

    if not documents:
        raise NoDocumentsFound(user_path)

    return documents


async def extract_links_from_path(
    file_path: str,
    options: Options,
    client: Optional[httpx.AsyncClient] = None,
) -> List[Link]:
    """Read one document, extract its links and validate them if requested.

    Raises:
        ReadFailure: If the document cannot be read.
    """
    content = await read_document_async(file_path)
    links = extract_links(content, file_path)
    _log(f"[EXTRACTING] {file_path}: {len(links)} link(s)")

    if options.validate:
        return await validate_links(links, client)
    return links


async def md_links(raw_path: str, options: Optional[Options] = None) -> MdLinksResult:
    """Extract (and optionally validate / summarise) the links under *raw_path*.

    Args:
        raw_path: A Markdown file or a directory to search recursively.
        options: Run switches; defaults to ``Options()`` (raw links only).

    Returns:
        :class:`~mdlinks.models.Stats` when ``options.stats`` is set,
        otherwise :class:`~mdlinks.models.ValidatedLinks` or
        :class:`~mdlinks.models.RawLinks` depending on ``options.validate``.

    Raises:
        PathNotFound, NoDocumentsFound: Before any document is read.
        ReadFailure: If any document is unreadable.  Every file task still
            runs to completion; the first failure in file order is raised and
            no partial result is returned.
    """
    options = options or Options()
    documents = find_documents(raw_path)

    async with make_client() as client:
        per_file = await asyncio.gather(
            *(extract_links_from_path(path, options, client) for path in documents),
            return_exceptions=True,
        )

    for outcome in per_file:
        if isinstance(outcome, BaseException):
            raise outcome

    all_links = [link for links in per_file for link in links]

    if options.stats:
        return aggregate(all_links, options)
    if options.validate:
        return ValidatedLinks(all_links)
    return RawLinks(all_links)


def md_links_sync(raw_path: str, options: Optional[Options] = None) -> MdLinksResult:
    """Blocking wrapper around :func:`md_links`."""
    return asyncio.run(md_links(raw_path, options))
