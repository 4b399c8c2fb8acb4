"""Errors raised by the mdlinks pipeline.

Filesystem and path problems are fatal to a run.  Network failures never
surface here: the validator folds them into :class:`~mdlinks.models.ValidatedLink`
records instead.
"""

from __future__ import annotations


class MdLinksError(Exception):
    """Base class for every error a pipeline run can raise."""

    message = "mdlinks failed"

    def __init__(self, path: str) -> None:
        super().__init__(f"{self.message}: {path}")
        self.path = path


class PathNotFound(MdLinksError):
    message = "The given path does not exist"


class NoDocumentsFound(MdLinksError):
    message = "No .md files were found in the given path"


class ReadFailure(MdLinksError):
    message = "Could not read path"
