"""Binary search tree with insertion, lookup and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """An unbalanced binary search tree holding distinct values."""

    def __init__(self, values: Iterable = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value) -> bool:
        """Add ``value``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def delete(self, value) -> None:
        """Remove ``value``; raise KeyError if it is not in the tree."""
        self._root = self._delete(self._root, value)
        self._size -= 1

    def _delete(self, node: _Node | None, value) -> _Node | None:
        if node is None:
            raise KeyError(value)
        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        elif node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._delete(node.right, successor.value)
        else:
            return node.left if node.right is None else node.right
        return node

    def minimum(self):
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def inorder(self) -> list:
        """Return the values in ascending order."""
        return list(self)

    def __contains__(self, value) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator:
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"