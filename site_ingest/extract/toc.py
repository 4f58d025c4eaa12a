# site_ingest/extract/toc.py
"""
Table-of-contents generation from an ordered heading sequence (h1…h4).

Each heading gets a path-style index built from per-level counters: a new
heading increments its own level and resets every deeper level, so
``[h1, h2, h2, h3, h1, h2]`` is numbered ``1, 1-1, 1-2, 1-2-1, 2, 2-1``.
Levels that were skipped (an h3 directly under an h1) contribute nothing to
the index instead of a zero.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

MAX_LEVEL = 4
TOC_BANNER = "Table of Contents"
INDEX_SEPARATOR = "-"


@dataclass(frozen=True, slots=True)
class HeadingNode:
    level: int
    text: str
    index: str


def number_headings(headings: Iterable[Tuple[int, str]]) -> List[HeadingNode]:
    counters = [0] * MAX_LEVEL
    nodes: List[HeadingNode] = []
    for level, text in headings:
        if not 1 <= level <= MAX_LEVEL:
            continue
        counters[level - 1] += 1
        for deeper in range(level, MAX_LEVEL):
            counters[deeper] = 0
        index = INDEX_SEPARATOR.join(str(c) for c in counters[:level] if c > 0)
        nodes.append(HeadingNode(level=level, text=text, index=index))
    return nodes


def build_toc(headings: Iterable[Tuple[int, str]]) -> str:
    """Render ``"Table of Contents"`` followed by one ``"<index> <text>"`` line per heading."""
    lines = [TOC_BANNER]
    lines.extend(f"{node.index} {node.text}" for node in number_headings(headings))
    return "\n".join(lines) + "\n"


__all__ = ["HeadingNode", "TOC_BANNER", "build_toc", "number_headings"]
