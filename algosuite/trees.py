"""Binary tree node type and classic binary tree algorithms."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Return every root-to-leaf path as values joined by '->', left paths first."""
    if root is None:
        return []
    paths: list[str] = []
    stack: list[tuple[TreeNode, str]] = [(root, str(root.val))]
    while stack:
        node, path = stack.pop()
        if node.left is None and node.right is None:
            paths.append(path)
            continue
        # Right is pushed first so that the left subtree is explored first.
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, f"{path}->{child.val}"))
    return paths


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def kth_largest_level_sum(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th largest sum of values on one level of the tree.

    Raises ValueError when the tree has fewer than k levels.
    """
    sums = sorted((sum(node.val for node in level) for level in _levels(root)), reverse=True)
    if k < 1 or len(sums) < k:
        raise ValueError(f"tree has {len(sums)} levels, cannot take level {k}")
    return sums[k - 1]


def replace_value_in_tree(root: TreeNode) -> TreeNode:
    """Replace each value with the sum of its cousins' values, in place."""
    root.val = 0
    level = [root]
    while level:
        total = sum(
            child.val
            for node in level
            for child in (node.left, node.right)
            if child is not None
        )
        next_level: list[TreeNode] = []
        for node in level:
            children = [child for child in (node.left, node.right) if child is not None]
            siblings = sum(child.val for child in children)
            for child in children:
                child.val = total - siblings
            next_level.extend(children)
        level = next_level
    return root


def serialize(root: Optional[TreeNode]) -> str:
    """Encode a tree in level order as comma-terminated tokens, '#' for missing nodes."""
    if root is None:
        return ""
    parts: list[str] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append("#,")
        else:
            parts.append(f"{node.val},")
            queue.append(node.left)
            queue.append(node.right)
    return "".join(parts)


def deserialize(data: str) -> Optional[TreeNode]:
    """Rebuild a tree from the output of serialize.

    Raises ValueError on truncated or malformed data.
    """
    if not data:
        return None
    tokens = data.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    stream = iter(tokens)

    def take() -> Optional[TreeNode]:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("serialized tree ends too early") from None
        return None if token == "#" else TreeNode(int(token))

    root = take()
    if root is None:
        raise ValueError("serialized tree has no root value")
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left = take()
        node.right = take()
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root


class BSTIterator:
    """Iterate over a binary search tree in ascending order, or descending when reverse."""

    def __init__(self, root: Optional[TreeNode], reverse: bool = False) -> None:
        self._reverse = reverse
        self._stack: list[TreeNode] = []
        self._push_all(root)

    def _push_all(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.right if self._reverse else node.left

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_all(node.left if self._reverse else node.right)
        return node.val

    def has_next(self) -> bool:
        """Tell whether another value remains."""
        return bool(self._stack)


def find_target(root: Optional[TreeNode], k: int) -> bool:
    """Tell whether two distinct nodes of a BST have values summing to k."""
    if root is None:
        return False
    ascending = BSTIterator(root, reverse=False)
    descending = BSTIterator(root, reverse=True)
    low, high = next(ascending), next(descending)
    while low < high:
        total = low + high
        if total == k:
            return True
        if total < k:
            low = next(ascending)
        else:
            high = next(descending)
    return False


def width_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting gaps between the outermost nodes."""
    if root is None:
        return 0
    widest = 0
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        offset = level[0][1]
        widest = max(widest, level[-1][1] - offset + 1)
        next_level: list[tuple[TreeNode, int]] = []
        for node, position in level:
            position -= offset
            if node.left is not None:
                next_level.append((node.left, 2 * position + 1))
            if node.right is not None:
                next_level.append((node.right, 2 * position + 2))
        level = next_level
    return widest


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node of a BST holding val, or None."""
    while root is not None and root.val != val:
        root = root.left if val < root.val else root.right
    return root


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in in-order sequence."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def flip_equiv(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Tell whether one tree becomes the other by swapping children of some nodes."""
    if root1 is None and root2 is None:
        return True
    if root1 is None or root2 is None or root1.val != root2.val:
        return False
    return (
        flip_equiv(root1.left, root2.left) and flip_equiv(root1.right, root2.right)
    ) or (flip_equiv(root1.left, root2.right) and flip_equiv(root1.right, root2.left))


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a BST with strictly ordered values."""
    stack: list[tuple[Optional[TreeNode], Optional[int], Optional[int]]] = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if (low is not None and node.val <= low) or (high is not None and node.val >= high):
            return False
        stack.append((node.left, low, node.val))
        stack.append((node.right, node.val, high))
    return True


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Group values by column, left to right; top to bottom, ties sorted by value."""
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue: deque[tuple[TreeNode, int, int]] = deque([(root, 0, 0)])
    while queue:
        node, column, row = queue.popleft()
        columns[column][row].append(node.val)
        if node.left is not None:
            queue.append((node.left, column - 1, row + 1))
        if node.right is not None:
            queue.append((node.right, column + 1, row + 1))
    return [
        [val for row in sorted(rows) for val in sorted(rows[row])]
        for _, rows in sorted(columns.items())
    ]