"""Syntax tree produced by the parser and consumed by the target compilers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class Annotation:
    """A named annotation attached to an element."""

    name: str


@dataclass
class ChildLine:
    """A single child reference line, optionally carrying a modifier."""

    id: str
    modifier: str | None = None


@dataclass
class KeyValue:
    """A ``key: value`` pair inside an element body."""

    key: str
    value: str


@dataclass
class Element:
    """A named block holding annotations and child nodes."""

    name: str
    annotations: list[Annotation] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; child nodes carry a ``kind`` tag."""
        return {
            "name": self.name,
            "annotations": [{"name": annotation.name} for annotation in self.annotations],
            "children": [_node_to_dict(child) for child in self.children],
        }

    def elements(self) -> Iterator[Element]:
        """Yield the direct children that are elements."""
        return (child for child in self.children if isinstance(child, Element))


Node = Union[Element, ChildLine, KeyValue]


def _node_to_dict(node: Node) -> dict[str, Any]:
    if isinstance(node, Element):
        return {"kind": "Element", **node.to_dict()}
    if isinstance(node, ChildLine):
        return {"kind": "ChildLine", "modifier": node.modifier, "id": node.id}
    if isinstance(node, KeyValue):
        return {"kind": "KeyValue", "key": node.key, "value": node.value}
    raise TypeError(f"not a syntax node: {node!r}")