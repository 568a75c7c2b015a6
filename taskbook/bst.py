"""A binary search tree of distinct values."""

from __future__ import annotations

from typing import Any, Iterable, Optional


class DuplicateValueError(ValueError):
    """Raised when a value already present is inserted again."""


class BSTNode:
    """A node holding a value and its left and right children."""

    def __init__(self, value: Any):
        self.value = value
        self.left: Optional[BSTNode] = None
        self.right: Optional[BSTNode] = None

    def insert(self, value: Any) -> None:
        """Insert recursively; a value already present is ignored."""
        if value > self.value:
            if self.right is None:
                self.right = BSTNode(value)
            else:
                self.right.insert(value)
        elif value < self.value:
            if self.left is None:
                self.left = BSTNode(value)
            else:
                self.left.insert(value)

    def insert_faster(self, value: Any) -> None:
        """Insert iteratively; raise DuplicateValueError for a value already present."""
        node = self
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = BSTNode(value)
                    return
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    return
                node = node.left
            else:
                raise DuplicateValueError(
                    "Найден идентичный элемент, вставить его невозможно."
                )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BSTNode):
            return NotImplemented
        return (
            self.value == other.value
            and self.left == other.left
            and self.right == other.right
        )

    def __repr__(self) -> str:
        return f"BSTNode(value={self.value!r}, left={self.left!r}, right={self.right!r})"


class BinarySearchTree:
    """A binary search tree; its shape depends on the insertion order."""

    def __init__(self):
        self.root: Optional[BSTNode] = None

    def insert(self, value: Any) -> None:
        """Insert a value; raise DuplicateValueError if it is already present."""
        if self.root is None:
            self.root = BSTNode(value)
        else:
            self.root.insert_faster(value)

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> "BinarySearchTree":
        """Build a tree by inserting the values in order."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        return self.root == other.root

    def __repr__(self) -> str:
        return f"BinarySearchTree(root={self.root!r})"