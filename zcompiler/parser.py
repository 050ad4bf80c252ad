"""Line-based parser that finds top-level target blocks in source text."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .syntax import Element

_DECLARATION = re.compile(r"^([a-z]+)\s+([A-Za-z0-9_]+)\s*\{")


def iter_top_level_declarations(src: str) -> Iterator[tuple[str, str]]:
    """Yield ``(target_type, app_name)`` for every line opening a block."""
    for line in src.split("\n"):
        match = _DECLARATION.match(line.strip())
        if match:
            yield match.group(1), match.group(2)


def parse_source(src: str) -> Element:
    """Parse source into a ``Program`` element with one child per block.

    Each child is named ``"<target>:<name>"``.
    """
    children = [
        Element(f"{target_type}:{app_name}")
        for target_type, app_name in iter_top_level_declarations(src)
    ]
    return Element("Program", children=children)