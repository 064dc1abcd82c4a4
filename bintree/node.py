"""A linked binary tree node with parent pointers and tree measurements."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        child = Node(value, self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        child = Node(value, self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def detach(self) -> Node:
        """Remove this subtree from its parent and return it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
            self.parent = None
        return self

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def _walk(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        for node in self._walk():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        stack: list[Node] = []
        node: Optional[Node] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        reversed_order: list[int] = []
        stack = [self]
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    @staticmethod
    def _levels(node: Optional[Node]) -> int:
        """Number of levels below and including node; 0 for no node."""
        if node is None:
            return 0
        levels = 0
        current = [node]
        while current:
            levels += 1
            current = [
                child
                for n in current
                for child in (n.left, n.right)
                if child is not None
            ]
        return levels

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return self._levels(self) - 1

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self._walk())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node in self._walk() if node.is_leaf())

    def nodes(self) -> int:
        """Number of nodes with at least one child."""
        return sum(1 for node in self._walk() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus the height of the right subtree."""
        return self._levels(self.left) - self._levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._walk()
        )

    def is_perfect(self) -> bool:
        """Return True if the tree is full and all leaves share one depth."""
        leaf_depths: set[int] = set()
        queue = deque([(self, 0)])
        while queue:
            node, level = queue.popleft()
            if node.is_leaf():
                leaf_depths.add(level)
            elif node.left is None or node.right is None:
                return False
            else:
                queue.append((node.left, level + 1))
                queue.append((node.right, level + 1))
        return len(leaf_depths) == 1

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        return parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()