# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""EnvTree node class."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import EnvTree


class EnvTreeNode:
    """A node in an EnvTree hierarchy.

    Each node has:
    - label: The path segment naming the node within its parent
    - value: Either a decoded leaf value or an EnvTree (for children)

    Example:
        >>> node = EnvTreeNode('host', 'localhost')
        >>> node.label
        'host'
        >>> node.is_leaf
        True
    """

    __slots__ = ('label', 'value')

    def __init__(self, label: str, value: Any = None) -> None:
        """Initialize an EnvTreeNode.

        Args:
            label: The node's path segment.
            value: The node's value (leaf value or EnvTree for children).
        """
        self.label = label
        self.value = value

    def __repr__(self) -> str:
        from .core import EnvTree
        value_repr = (
            f"EnvTree({len(self.value)})"
            if isinstance(self.value, EnvTree)
            else repr(self.value)
        )
        return f"EnvTreeNode({self.label!r}, value={value_repr})"

    @property
    def is_branch(self) -> bool:
        """True if this node contains an EnvTree (has children)."""
        from .core import EnvTree
        return isinstance(self.value, EnvTree)

    @property
    def is_leaf(self) -> bool:
        """True if this node contains a leaf value."""
        return not self.is_branch
