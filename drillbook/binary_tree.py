"""A binary tree of integers built level by level or from two traversals."""

from __future__ import annotations

import argparse
import sys
from collections import Counter, deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

NO_NODE = -1
"""Value that marks a missing child when building a tree level by level."""


@dataclass(eq=False)
class Node:
    """A tree node holding an integer and up to two children."""

    data: int
    left: Node | None = None
    right: Node | None = None


class BinaryTree:
    """A binary tree with recursive and iterative traversals."""

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    @classmethod
    def _read_level_order(cls, read: Callable[[str], int]) -> BinaryTree:
        root = Node(read("Enter a value for root node "))
        queue = deque([root])
        while queue:
            node = queue.popleft()
            value = read(f"Enter a value for leftChild of the node with value {node.data}")
            if value != NO_NODE:
                node.left = Node(value)
                queue.append(node.left)
            value = read(f"Enter a value for rightChild of the node with value {node.data}")
            if value != NO_NODE:
                node.right = Node(value)
                queue.append(node.right)
        return cls(root)

    @classmethod
    def from_level_order(cls, values: Iterable[int]) -> BinaryTree:
        """Build a tree from the root value followed by each node's children.

        Children are given left then right, in breadth-first order of their
        parents; ``NO_NODE`` marks a missing child.
        """
        remaining = iter(values)

        def read(prompt: str) -> int:
            value = next(remaining, None)
            if value is None:
                raise ValueError("level-order values ended before the tree was complete")
            return value

        return cls._read_level_order(read)

    @classmethod
    def from_traversals(cls, inorder: Iterable[int], preorder: Iterable[int]) -> BinaryTree:
        """Rebuild a tree of distinct values from its in-order and pre-order traversals."""
        inorder_values, preorder_values = list(inorder), list(preorder)
        if Counter(inorder_values) != Counter(preorder_values):
            raise ValueError("the traversals do not hold the same values")
        next_preorder = iter(preorder_values)

        def build(start: int, end: int) -> Node | None:
            if start > end:
                return None
            node = Node(next(next_preorder))
            if start == end:
                return node
            try:
                split = inorder_values.index(node.data, start, end + 1)
            except ValueError:
                raise ValueError("the traversals do not describe one tree") from None
            node.left = build(start, split - 1)
            node.right = build(split + 1, end)
            return node

        return cls(build(0, len(inorder_values) - 1))

    def preorder(self) -> list[int]:
        """Node values root first, then left subtree, then right subtree."""
        result: list[int] = []

        def visit(node: Node | None) -> None:
            if node is not None:
                result.append(node.data)
                visit(node.left)
                visit(node.right)

        visit(self.root)
        return result

    def preorder_iterative(self) -> list[int]:
        """Pre-order traversal using an explicit stack."""
        result: list[int] = []
        stack: list[Node] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                result.append(node.data)
                stack.append(node)
                node = node.left
            else:
                node = stack.pop().right
        return result

    def inorder(self) -> list[int]:
        """Node values left subtree first, then root, then right subtree."""
        result: list[int] = []

        def visit(node: Node | None) -> None:
            if node is not None:
                visit(node.left)
                result.append(node.data)
                visit(node.right)

        visit(self.root)
        return result

    def inorder_iterative(self) -> list[int]:
        """In-order traversal using an explicit stack."""
        result: list[int] = []
        stack: list[Node] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                result.append(node.data)
                node = node.right
        return result

    def postorder(self) -> list[int]:
        """Node values left subtree first, then right subtree, then root."""
        result: list[int] = []

        def visit(node: Node | None) -> None:
            if node is not None:
                visit(node.left)
                visit(node.right)
                result.append(node.data)

        visit(self.root)
        return result

    def postorder_iterative(self) -> list[int]:
        """Post-order traversal with one stack and the last node emitted."""
        result: list[int] = []
        stack: list[Node] = []
        last: Node | None = None
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                top = stack[-1]
                if top.right is not None and top.right is not last:
                    node = top.right
                else:
                    result.append(top.data)
                    last = top
                    stack.pop()
        return result

    def postorder_iterative2(self) -> list[int]:
        """Post-order traversal with two stacks."""
        if self.root is None:
            return []
        collected: list[Node] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            collected.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return [node.data for node in reversed(collected)]

    def level_order(self) -> list[int]:
        """Node values breadth first, left to right on each level."""
        result: list[int] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            result.append(node.data)
        return result


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _format(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Read a tree level by level from standard input and print its traversals."""
    parser = argparse.ArgumentParser(
        description="Build a binary tree interactively and print its traversals."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    def read(prompt: str) -> int:
        print(prompt)
        token = next(tokens, None)
        if token is None:
            raise ValueError("input ended before the tree was complete")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"{token!r} is not an integer") from None

    try:
        tree = BinaryTree._read_level_order(read)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sections = [
        ("Pre Order", tree.preorder),
        ("Pre Order (iterative)", tree.preorder_iterative),
        ("In Order", tree.inorder),
        ("In Order (iterative)", tree.inorder_iterative),
        ("Post Order", tree.postorder),
        ("Post Order (iterative)", tree.postorder_iterative),
        ("Post Order (iterative2)", tree.postorder_iterative2),
        ("Level Order (iterative)", tree.level_order),
    ]
    for label, traversal in sections:
        print(f"Tree 1: {label}: {_format(traversal())}")

    second = BinaryTree.from_traversals([3, 2, 4, 1, 6, 5, 7], [1, 2, 3, 4, 5, 6, 7])
    print(f"Tree 2: Pre Order: {_format(second.preorder())}")
    return 0