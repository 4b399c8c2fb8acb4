"""mdlinks — find, check and count the links in Markdown documents."""

from mdlinks.errors import MdLinksError, NoDocumentsFound, PathNotFound, ReadFailure
from mdlinks.models import (
    Link,
    MdLinksResult,
    Options,
    RawLinks,
    Stats,
    ValidatedLink,
    ValidatedLinks,
)
from mdlinks.pipeline import md_links, md_links_sync

__all__ = [
    "md_links",
    "md_links_sync",
    "Options",
    "Link",
    "ValidatedLink",
    "RawLinks",
    "ValidatedLinks",
    "Stats",
    "MdLinksResult",
    "MdLinksError",
    "PathNotFound",
    "NoDocumentsFound",
    "ReadFailure",
]
