"""HTTP reachability checks for extracted links.

Every link gets exactly one ``GET``.  All probes for a call run concurrently
and each one is isolated: a failure is recorded on that link's
:class:`ValidatedLink` and never raised.
"""

from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

import httpx

from mdlinks.config import settings
from mdlinks.models import OK_MARKER, Link, ValidatedLink

FALLBACK_STATUS = 500
FALLBACK_TEXT = "Internal Server Error"


def make_client() -> httpx.AsyncClient:
    """Return an ``AsyncClient`` configured from ``settings``.

    The pool timeout is disabled so probes beyond ``max_connections`` wait
    for a free connection instead of failing.
    """
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=httpx.Timeout(settings.request_timeout, pool=None),
        limits=httpx.Limits(max_connections=settings.max_connections),
        follow_redirects=True,
    )


async def probe_link(client: httpx.AsyncClient, link: Link) -> ValidatedLink:
    """Probe ``link.href`` and return the link with its verdict attached."""
    try:
        response = await client.get(link.href)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code or FALLBACK_STATUS
        reason = exc.response.reason_phrase or FALLBACK_TEXT
        return ValidatedLink.from_link(link, status=status, ok=reason)
    except Exception as exc:
        # No response at all: DNS, refused connection, timeout, bad URL or host.
        if settings.verbose:
            print(f"[VALIDATING] ✗ {link.href}: {exc!r}", file=sys.stderr)
        return ValidatedLink.from_link(link, status=FALLBACK_STATUS, ok=FALLBACK_TEXT)

    return ValidatedLink.from_link(link, status=response.status_code, ok=OK_MARKER)


async def validate_links(
    links: List[Link],
    client: Optional[httpx.AsyncClient] = None,
) -> List[ValidatedLink]:
    """Probe every link concurrently.

    Args:
        links: Links to check.
        client: Shared client to issue requests with.  When omitted a client
            is created from ``settings`` and closed before returning.

    Returns:
        One :class:`ValidatedLink` per input link, in input order regardless
        of which probe finished first.
    """
    if not links:
        return []

    if client is None:
        async with make_client() as own_client:
            return await validate_links(links, own_client)

    if settings.verbose:
        print(f"[VALIDATING] Probing {len(links)} link(s) …", file=sys.stderr)

    results = await asyncio.gather(*(probe_link(client, link) for link in links))
    return list(results)
