"""Insertion sort using an unbalanced binary tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, MutableSequence


@dataclass
class _Tree:
    value: int
    left: _Tree | None = None
    right: _Tree | None = None


def _add(root: _Tree | None, value: int) -> _Tree:
    node = _Tree(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def _in_order(root: _Tree | None) -> Iterator[int]:
    stack: list[_Tree] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place."""
    root: _Tree | None = None
    for v in values:
        root = _add(root, v)
    values[:] = list(_in_order(root))