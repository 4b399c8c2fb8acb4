"""Data models for the link pipeline.

Plain dataclasses, produced per run and never persisted.  A pipeline run
returns exactly one of :class:`RawLinks`, :class:`ValidatedLinks` or
:class:`Stats`, depending on the :class:`Options` it was given.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterator, List, Optional, Union

OK_MARKER = "ok"


@dataclass(frozen=True)
class Options:
    """Switches for a single pipeline run."""

    validate: bool = False
    stats: bool = False


@dataclass
class Link:
    """A ``[text](href)`` reference found in a Markdown document."""

    file: str
    text: str
    href: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ValidatedLink(Link):
    """A :class:`Link` plus the outcome of probing its ``href``.

    ``ok`` is :data:`OK_MARKER` on success, otherwise the failure description
    (usually the HTTP reason phrase).
    """

    status: int = 0
    ok: str = ""

    @classmethod
    def from_link(cls, link: Link, status: int, ok: str) -> ValidatedLink:
        return cls(file=link.file, text=link.text, href=link.href, status=status, ok=ok)

    @property
    def broken(self) -> bool:
        return self.ok != OK_MARKER


@dataclass
class Stats:
    total: int
    unique: int
    broken: Optional[int] = None

    def to_dict(self) -> dict[str, int]:
        data = {"total": self.total, "unique": self.unique}
        if self.broken is not None:
            data["broken"] = self.broken
        return data


@dataclass
class RawLinks:
    """Result of a run with neither ``validate`` nor ``stats``."""

    links: List[Link] = field(default_factory=list)

    def __iter__(self) -> Iterator[Link]:
        return iter(self.links)

    def __len__(self) -> int:
        return len(self.links)

    def to_dict(self) -> list[dict[str, Any]]:
        return [link.to_dict() for link in self.links]


@dataclass
class ValidatedLinks:
    """Result of a run with ``validate`` but without ``stats``."""

    links: List[ValidatedLink] = field(default_factory=list)

    def __iter__(self) -> Iterator[ValidatedLink]:
        return iter(self.links)

    def __len__(self) -> int:
        return len(self.links)

    def to_dict(self) -> list[dict[str, Any]]:
        return [link.to_dict() for link in self.links]


MdLinksResult = Union[RawLinks, ValidatedLinks, Stats]
