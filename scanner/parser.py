"""Extraction of inline markdown links from lines of text."""

import re
from typing import List, NamedTuple

from .errors import InternalInvariantError


# [display text](target.md): display text has no '[', target has no '('.
LINK_PATTERN = re.compile(r"\[([^\[]*)\]\(([^\(]*\.md)\)")

# Lines shown before and after a matched line when reporting a link.
CONTEXT_BEFORE = 1
CONTEXT_AFTER = 2


class RawLink(NamedTuple):
    """A link match on one line, before its target is resolved."""

    text: str
    target: str
    column: int


def extract_links(line: str) -> List[RawLink]:
    """
    Find every inline link to a ``.md`` target on a single line.

    Args:
        line: One line of markdown, without its trailing newline.

    Returns:
        Matches from left to right. ``target`` is the raw span as written
        (still percent-encoded) and ``column`` is the offset of the
        opening ``[``.

    Raises:
        InternalInvariantError: If a match lacks the text or target group.
    """
    links: List[RawLink] = []
    for match in LINK_PATTERN.finditer(line):
        groups = match.groups()
        if len(groups) != 2 or any(group is None for group in groups):
            raise InternalInvariantError(
                f"unexpected link match structure {groups!r} at column {match.start()} of line {line!r}"
            )
        text, target = groups
        links.append(RawLink(text=text, target=target, column=match.start()))
    return links


def context_window(row: int, total_lines: int) -> range:
    """
    Get the indices of the lines displayed around ``row``.

    One line before and two after the match, clipped to the file, so at
    most four indices are returned.
    """
    start = max(0, row - CONTEXT_BEFORE)
    end = min(total_lines, row + CONTEXT_AFTER + 1)
    return range(start, max(start, end))
