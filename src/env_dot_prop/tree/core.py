# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""EnvTree - ordered nested container used to assemble table reads.

EnvTree holds the decoded values of the matched table keys under their
dotted paths. It is rebuilt for every read and discarded afterwards.

Key Features:
    - **O(1) lookup**: Internal dict-based storage for fast access by label
    - **Insertion order**: Children keep the order their keys were applied
    - **Autocreate**: Setting a deep path creates intermediate branches
    - **Leaf promotion**: Setting beneath a leaf turns the leaf into a branch,
      so the deeper key wins
    - **Escaped dots**: ``a\\.b`` addresses the single segment ``a.b``

Example:
    >>> tree = EnvTree()
    >>> tree.set_item('foo', 'a')
    >>> tree.set_item('foo.bar', 'b')
    >>> tree.as_dict()
    {'foo': {'bar': 'b'}}
"""

from __future__ import annotations

from typing import Any, Iterator

from ..codec import split_path
from .node import EnvTreeNode


class EnvTree:
    """An ordered hierarchical container with O(1) lookup.

    EnvTree provides:
    - set_item(path, value): Create/replace nodes with autocreate
    - get_item(path) / tree[path]: Get values
    - as_dict(): Plain nested dict rendering
    """

    __slots__ = ('_nodes', '_order')

    def __init__(self, source: dict[str, Any] | None = None) -> None:
        """Initialize an EnvTree.

        Args:
            source: Optional nested dict; nested dicts become branches.
        """
        self._nodes: dict[str, EnvTreeNode] = {}
        self._order: list[EnvTreeNode] = []

        if source is not None:
            self._load_dict(source)

    def _load_dict(self, source: dict[str, Any]) -> None:
        for label, value in source.items():
            self._set_label(str(label), value)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"EnvTree({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of direct children in this tree."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[EnvTreeNode]:
        """Iterate over direct child nodes in insertion order."""
        return iter(self._order)

    def __contains__(self, path: str) -> bool:
        """Check if a dotted path exists in this tree."""
        try:
            self.get_node(path)
            return True
        except KeyError:
            return False

    # ==================== Node Utilities ====================

    def _insert_node(self, node: EnvTreeNode) -> None:
        self._nodes[node.label] = node
        self._order.append(node)

    def _new_branch(self, label: str, source: dict[str, Any] | None = None) -> EnvTreeNode:
        return EnvTreeNode(label, value=EnvTree(source))

    def _set_label(self, label: str, value: Any) -> None:
        """Set ``label`` at this level, replacing any leaf or branch.

        Decoded JSON objects become branches so that longer keys can still
        add children beneath them. An existing node keeps its position.
        """
        if isinstance(value, dict):
            fresh = self._new_branch(label, value)
        else:
            fresh = EnvTreeNode(label, value=value)

        existing = self._nodes.get(label)
        if existing is None:
            self._insert_node(fresh)
            return
        existing.value = fresh.value

    def _htraverse(
        self, segments: list[str], autocreate: bool = False
    ) -> tuple[EnvTree, str]:
        """Traverse path segments, optionally creating intermediate nodes.

        Args:
            segments: Path segments (already unescaped).
            autocreate: If True, create missing intermediate branches and
                convert leaves found on the way into branches.

        Returns:
            Tuple of (parent_tree, final_label)

        Raises:
            KeyError: If a segment is missing, or a leaf is met, and
                autocreate is False.
        """
        current = self

        for i, segment in enumerate(segments[:-1]):
            node = current._nodes.get(segment)
            if node is None:
                if not autocreate:
                    raise KeyError(f"Path segment '{segment}' not found")
                node = current._new_branch(segment)
                current._insert_node(node)

            if not node.is_branch:
                if autocreate:
                    # Convert leaf to branch
                    node.value = EnvTree()
                else:
                    remaining = '.'.join(segments[i + 1:])
                    raise KeyError(f"'{segment}' is a leaf, cannot access '{remaining}'")

            current = node.value

        return current, segments[-1]

    # ==================== Core API ====================

    def set_item(self, path: str, value: Any) -> None:
        """Set a value at the given path, creating intermediate nodes as needed.

        Whatever was stored at ``path`` before (leaf or whole subtree) is
        replaced.

        Args:
            path: Dotted path, ``\\.`` for a literal dot inside a segment.
            value: The value to store. A dict is stored as a branch.

        Raises:
            KeyError: If ``path`` is empty.
        """
        segments = split_path(path)
        if not segments:
            raise KeyError("Empty path")
        parent, label = self._htraverse(segments, autocreate=True)
        parent._set_label(label, value)

    def get_node(self, path: str) -> EnvTreeNode:
        """Get node at the given path.

        Raises:
            KeyError: If path not found.
        """
        segments = split_path(path)
        if not segments:
            raise KeyError("Empty path")
        parent, label = self._htraverse(segments, autocreate=False)
        return parent._nodes[label]

    def get_item(self, path: str, default: Any = None) -> Any:
        """Get the value at the given path.

        Branches are returned as EnvTree instances; see ``as_dict``.

        Args:
            path: Dotted path.
            default: Default value if path not found.
        """
        try:
            return self.get_node(path).value
        except KeyError:
            return default

    def __getitem__(self, path: str) -> Any:
        return self.get_node(path).value

    # ==================== Iteration ====================

    def keys(self) -> list[str]:
        """Return list of labels at this level in insertion order."""
        return [node.label for node in self._order]

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to plain nested dict (recursive)."""
        result: dict[str, Any] = {}
        for node in self._order:
            if node.is_branch:
                result[node.label] = node.value.as_dict()
            else:
                result[node.label] = node.value
        return result
