"""
Outline parser shared by the preview manifest and the code generator.

Lines are indented with two spaces per level:

    Animals
      Mammals
        Dogs
      Birds
    Plants

A line whose indentation jumps more than one level below its predecessor
ends parsing; it and every later line are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class OutlineNode:
    label: str
    children: List["OutlineNode"] = field(default_factory=list)


def indent_level(line: str) -> int:
    return (len(line) - len(line.lstrip(" "))) // 2


def _entries(lines: Iterable[str]) -> List[Tuple[int, str]]:
    entries = [(indent_level(line), line.strip()) for line in lines]
    return [(level, label) for level, label in entries if label]


def parse_outline(lines: Iterable[str]) -> List[OutlineNode]:
    roots: List[OutlineNode] = []
    # open_levels[k] collects siblings at level k; after a node at level L is
    # taken the next line may sit anywhere in 0..L+1.
    open_levels: List[List[OutlineNode]] = [roots]
    for level, label in _entries(lines):
        if level >= len(open_levels):
            break
        del open_levels[level + 1 :]
        node = OutlineNode(label)
        open_levels[level].append(node)
        open_levels.append(node.children)
    return roots


def fold_outline(nodes: Sequence[OutlineNode], visit: Callable[[OutlineNode, List[T]], T]) -> List[T]:
    """Bottom-up fold of a forest: ``visit(node, folded_children)``, no recursion."""
    done: Dict[int, T] = {}
    stack: List[Tuple[OutlineNode, bool]] = [(node, False) for node in reversed(nodes)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            done[id(node)] = visit(node, [done.pop(id(child)) for child in node.children])
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.children))
    return [done.pop(id(node)) for node in nodes]


def outline_to_dicts(nodes: Sequence[OutlineNode]) -> List[dict[str, Any]]:
    return fold_outline(nodes, lambda node, children: {"label": node.label, "children": children})
