"""A self-balancing AVL tree built from immutable-style operations on nodes.

Every operation that changes the tree returns the new root of the subtree it
was applied to; ``None`` stands for an empty tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AVLNode:
    """A node of an AVL tree holding a key and the height of its subtree."""

    key: Any
    height: int = 1
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None

    def b_factor(self) -> int:
        """Height of the right subtree minus height of the left one."""
        return height(self.right) - height(self.left)

    def fix_height(self) -> None:
        """Recompute this node's height from its children."""
        self.height = max(height(self.left), height(self.right)) + 1

    def rotate_right(self) -> "AVLNode":
        """Rotate the subtree right and return its new root."""
        pivot = self.left
        if pivot is None:
            raise ValueError("cannot rotate right without a left child")
        self.left = pivot.right
        pivot.right = self
        self.fix_height()
        pivot.fix_height()
        return pivot

    def rotate_left(self) -> "AVLNode":
        """Rotate the subtree left and return its new root."""
        pivot = self.right
        if pivot is None:
            raise ValueError("cannot rotate left without a right child")
        self.right = pivot.left
        pivot.left = self
        self.fix_height()
        pivot.fix_height()
        return pivot

    def balance(self) -> "AVLNode":
        """Restore the AVL property at this node and return the subtree root."""
        self.fix_height()
        factor = self.b_factor()
        if factor == 2:
            if self.right.b_factor() < 0:
                self.right = self.right.rotate_right()
            return self.rotate_left()
        if factor == -2:
            if self.left.b_factor() > 0:
                self.left = self.left.rotate_left()
            return self.rotate_right()
        return self

    def insert(self, key: Any) -> "AVLNode":
        """Insert ``key`` and return the new subtree root; equal keys go right."""
        if key < self.key:
            self.left = insert(self.left, key)
        else:
            self.right = insert(self.right, key)
        return self.balance()

    def _remove_min(self) -> tuple[Optional["AVLNode"], "AVLNode"]:
        """Detach the node with the smallest key; return (rest, detached)."""
        if self.left is None:
            rest = self.right
            self.right = None
            return rest, self
        rest, smallest = self.left._remove_min()
        self.left = rest
        return self.balance(), smallest

    def remove(self, key: Any) -> Optional["AVLNode"]:
        """Remove ``key`` and return the new subtree root.

        When the key is absent, the subtree where the search runs out of
        children is dropped, as the search reports an empty result there.
        """
        if key < self.key:
            if self.left is None:
                return None
            self.left = self.left.remove(key)
        elif key > self.key:
            if self.right is None:
                return None
            self.right = self.right.remove(key)
        else:
            if self.right is None:
                return self.left
            left = self.left
            rest, smallest = self.right._remove_min()
            smallest.right = rest
            smallest.left = left
            return smallest.balance()
        return self.balance()

    def find(self, key: Any) -> bool:
        """Tell whether ``key`` is in the subtree."""
        node: Optional[AVLNode] = self
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def count(self) -> int:
        """Number of nodes in the subtree."""
        return count(self.left) + count(self.right) + 1


def height(node: Optional[AVLNode]) -> int:
    """Height of a possibly empty subtree."""
    return 0 if node is None else node.height


def insert(node: Optional[AVLNode], key: Any) -> AVLNode:
    """Insert ``key`` into a possibly empty tree and return the new root."""
    return AVLNode(key) if node is None else node.insert(key)


def remove(node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
    """Remove ``key`` from a possibly empty tree and return the new root."""
    return None if node is None else node.remove(key)


def find(node: Optional[AVLNode], key: Any) -> bool:
    """Tell whether ``key`` is in a possibly empty tree."""
    return False if node is None else node.find(key)


def count(node: Optional[AVLNode]) -> int:
    """Number of nodes in a possibly empty tree."""
    return 0 if node is None else node.count()


def generate_tree_demo() -> Optional[AVLNode]:
    """Build a sample tree, print it, remove 16, print it again and return it."""
    tree: Optional[AVLNode] = None
    for key in (16, 17, 15, 1, 20, 21, 14):
        tree = insert(tree, key)
    print(repr(tree))
    tree = remove(tree, 16)
    print(repr(tree))
    return tree