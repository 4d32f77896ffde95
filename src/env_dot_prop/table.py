# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Flat key-value table boundary.

The table is owned by the host: env-dot-prop only reads and mutates the
entries it holds. ``EnvironTable`` adapts any ``MutableMapping[str, str]``
(by default the live ``os.environ``) to the ``Table`` protocol, so tests and
embedders can inject a plain dict.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, MutableMapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class Table(Protocol):
    """Primitives required from the host table."""

    def keys(self) -> Iterable[str]:
        ...

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class EnvironTable:
    """A ``Table`` over a string mapping, ``os.environ`` by default.

    Example:
        >>> table = EnvironTable({'FOO_BAR': '1'})
        >>> table.get('FOO_BAR')
        '1'
    """

    __slots__ = ('_environ',)

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        """Initialize the table.

        Args:
            environ: Mapping to operate on (referenced, not copied).
                Defaults to ``os.environ``.
        """
        self._environ = os.environ if environ is None else environ

    def __repr__(self) -> str:
        return f"EnvironTable({len(self._environ)} keys)"

    def __len__(self) -> int:
        return len(self._environ)

    @property
    def environ(self) -> MutableMapping[str, str]:
        """The underlying mapping."""
        return self._environ

    def keys(self) -> list[str]:
        """Return a snapshot of the keys in enumeration order."""
        return list(self._environ.keys())

    def get(self, key: str) -> str | None:
        return self._environ.get(key)

    def set(self, key: str, value: str) -> None:
        self._environ[key] = value

    def delete(self, key: str) -> None:
        """Remove ``key``; a missing key is ignored."""
        self._environ.pop(key, None)
