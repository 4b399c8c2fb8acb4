"""Plain-text and JSON rendering of pipeline results for the CLI."""

from __future__ import annotations

import json
import os
from typing import List

from mdlinks.models import Link, MdLinksResult, Stats, ValidatedLink


def _display_path(path: str) -> str:
    """Show *path* relative to the working directory when it lies beneath it."""
    rel = os.path.relpath(path)
    return path if rel.startswith("..") else rel


def render_link(link: Link) -> str:
    file = _display_path(link.file)
    if isinstance(link, ValidatedLink):
        return f"{file} {link.href} {link.ok} {link.status} {link.text}"
    return f"{file} {link.href} {link.text}"


def render_stats(stats: Stats) -> str:
    lines = [f"Total: {stats.total}", f"Unique: {stats.unique}"]
    if stats.broken is not None:
        lines.append(f"Broken: {stats.broken}")
    return "\n".join(lines)


def render_result(result: MdLinksResult, as_json: bool = False) -> str:
    """Render any pipeline result as text (one line per link) or JSON."""
    if as_json:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    if isinstance(result, Stats):
        return render_stats(result)

    lines: List[str] = [render_link(link) for link in result]
    return "\n".join(lines)
