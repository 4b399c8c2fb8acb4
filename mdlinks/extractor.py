"""Link extraction: turns Markdown text into a list of :class:`Link`."""

from __future__ import annotations

import re
from typing import List

from mdlinks.models import Link

# [text](http://...) where text holds no "[" and the URL holds no ")".
_LINK_PATTERN = re.compile(r"\[([^\[]+)\]\((https?://[^)]+)\)")


def extract_links(content: str, source_file: str) -> List[Link]:
    """Return every inline link in *content*, in document order.

    Matches are scanned left to right without overlap.  Text that only
    partially looks like a link is ignored rather than reported.
    """
    return [
        Link(file=source_file, text=m.group(1), href=m.group(2))
        for m in _LINK_PATTERN.finditer(content)
    ]
