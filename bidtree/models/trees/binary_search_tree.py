"""
Unbalanced binary search tree shared by the bid indexes.

No rotations are performed, so the tree shape depends on insertion order.
Every walk uses an explicit stack instead of recursion, which keeps
degenerate (sorted-insert) trees of any height within the interpreter's
recursion limit.
"""

from abc import abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from bidtree.interfaces.bid_index import BidIndex
from bidtree.models.bid import Bid


@dataclass
class Node:
    """Node in a bid tree. Owns its children; there is no parent link."""

    bid: Bid
    left: "Node | None" = None
    right: "Node | None" = None


class BinarySearchTree(BidIndex):
    """
    Binary search tree ordered by a key derived from each bid.

    Properties maintained:
    1. Keys in the left subtree are <= the node's key
    2. Keys in the right subtree are >= the node's key
    3. Equal keys are inserted into the right subtree
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0

    @abstractmethod
    def _key(self, bid: Bid) -> Any:
        """Return the ordering key of a bid."""
        pass

    def insert(self, bid: Bid) -> None:
        """Insert a bid. O(h)"""
        new_node = Node(bid=bid)
        self._size += 1

        if self._root is None:
            self._root = new_node
            return

        key = self._key(bid)
        current = self._root
        while True:
            if key < self._key(current.bid):
                if current.left is None:
                    current.left = new_node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    return
                current = current.right

    def in_order(self) -> Iterator[Bid]:
        return _RangeIterator(self._root, self._key, None, None)

    def __iter__(self) -> Iterator[Bid]:
        return self.in_order()

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Bid]:
        return _RangeIterator(self._root, self._key, start, end)

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        if self._root is None:
            return 0

        deepest = 0
        stack: list[tuple[Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            if node.left:
                stack.append((node.left, depth + 1))
            if node.right:
                stack.append((node.right, depth + 1))
        return deepest

    def _find_node(self, key: Any) -> Node | None:
        """Return the first node with an equal key on the root-to-leaf descent."""
        current = self._root
        while current is not None:
            current_key = self._key(current.bid)
            if key == current_key:
                return current
            if key < current_key:
                current = current.left
            else:
                current = current.right
        return None

    def _remove(self, key: Any, matches: Callable[[Bid], bool]) -> bool:
        """
        Remove the node with an equal key whose bid satisfies `matches`.

        Args:
            key: Ordering key of the bid to remove.
            matches: Predicate selecting one bid among nodes sharing the key.

        Returns:
            True if a node was removed, False if none matched.
        """
        found = self._find_slot(key, matches)
        if found is None:
            return False

        parent, is_left, node = found
        replacement = self._splice(node)
        if parent is None:
            self._root = replacement
        elif is_left:
            parent.left = replacement
        else:
            parent.right = replacement

        self._size -= 1
        return True

    def _find_slot(
        self, key: Any, matches: Callable[[Bid], bool]
    ) -> tuple[Node | None, bool, Node] | None:
        """
        Locate a matching node together with the parent slot that holds it.

        Nodes with an equal key that do not match may have equal-keyed
        neighbours on either side, so both of their subtrees are searched.
        """
        stack: list[tuple[Node | None, bool, Node]] = []
        if self._root is not None:
            stack.append((None, False, self._root))

        while stack:
            parent, is_left, node = stack.pop()
            node_key = self._key(node.bid)

            if key < node_key:
                if node.left:
                    stack.append((node, True, node.left))
            elif key > node_key:
                if node.right:
                    stack.append((node, False, node.right))
            elif matches(node.bid):
                return parent, is_left, node
            else:
                # Ties are inserted on the right, so try that side first
                if node.left:
                    stack.append((node, True, node.left))
                if node.right:
                    stack.append((node, False, node.right))
        return None

    def _splice(self, node: Node) -> Node | None:
        """
        Unlink `node` and return the root of the subtree that replaces it.
        """
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left

        # Two children: take over the in-order successor's bid
        node.right, successor = self._detach_leftmost(node.right)
        node.bid = successor.bid
        return node

    @staticmethod
    def _detach_leftmost(subtree: Node) -> tuple[Node | None, Node]:
        """
        Remove the leftmost node of `subtree`.

        Returns:
            The new subtree root and the detached node.
        """
        parent = None
        current = subtree
        while current.left is not None:
            parent = current
            current = current.left

        if parent is None:
            return current.right, current

        parent.left = current.right
        return subtree, current


class _RangeIterator(Iterator[Bid]):
    """In-order iterator over the bids whose key lies in [start, end]."""

    def __init__(
        self,
        root: Node | None,
        key: Callable[[Bid], Any],
        start: Any,
        end: Any,
    ) -> None:
        self._stack: list[Node] = []
        self._key = key
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Bid]:
        return self

    def __next__(self) -> Bid:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Keys come out in non-decreasing order, so the first key past end finishes
        if self._end is not None and self._key(node.bid) > self._end:
            self._stack.clear()
            raise StopIteration

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return node.bid

    def _push_left_path(self, node: Node | None, start: Any) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and self._key(node.bid) < start:
                # Node and its left subtree are below start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left
