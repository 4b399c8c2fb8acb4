"""Reduce a list of links to summary counts."""

from __future__ import annotations

from typing import Optional, Sequence

from mdlinks.models import OK_MARKER, Link, Options, Stats


def aggregate(links: Sequence[Link], options: Optional[Options] = None) -> Stats:
    """Count *links*: total, distinct ``href`` values and, if validated, broken.

    When ``options.validate`` is set every element must be a
    :class:`~mdlinks.models.ValidatedLink`; this is not rechecked.  A link is
    broken when its ``ok`` verdict is anything other than ``"ok"``.
    """
    options = options or Options()
    total = len(links)
    unique = len({link.href for link in links})

    if options.validate:
        broken = sum(1 for link in links if link.ok != OK_MARKER)  # type: ignore[attr-defined]
        return Stats(total=total, unique=unique, broken=broken)

    return Stats(total=total, unique=unique)
