# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree assembler - rebuild a nested value from flat table keys.

Matched keys are applied to a fresh EnvTree in ascending key length
(stable, so equal lengths keep table enumeration order). When one key's
path is an ancestor of another's, the shorter key is applied first and the
longer one then turns the scalar into a branch: deeper keys always win.

Example:
    >>> from env_dot_prop.table import EnvironTable
    >>> table = EnvironTable({'FOO': 'a', 'FOO_BAR': 'b'})
    >>> read(table, 'foo')
    {'bar': 'b'}
"""

from __future__ import annotations

from typing import Any, Iterable

from .codec import fold_path, to_path_form
from .matcher import matched_keys
from .options import DEFAULT_OPTIONS, Options
from .table import Table
from .tree import EnvTree
from .values import decode_value, encode_value

_MISSING = object()


def assemble(
    table: Table, keys: Iterable[str], options: Options = DEFAULT_OPTIONS
) -> Any:
    """Fold ``keys`` and their decoded values into a single root.

    Args:
        table: Table to read values from.
        keys: Keys to apply, typically from ``matched_keys``.
        options: ``case_sensitive`` controls path folding, ``parse`` value
            decoding.

    Returns:
        An EnvTree, a bare value when a key decodes to the empty path and
        nothing longer follows it, or an internal sentinel when ``keys`` is
        empty.
    """
    root: Any = _MISSING
    for key in sorted(keys, key=len):
        path = fold_path(to_path_form(key), options.case_sensitive)
        value = decode_value(table.get(key), options)
        if not path:
            root = EnvTree(value) if isinstance(value, dict) else value
            continue
        if not isinstance(root, EnvTree):
            root = EnvTree()
        root.set_item(path, value)
    return root


def read(
    table: Table,
    path: str,
    default: Any = None,
    options: Options = DEFAULT_OPTIONS,
) -> Any:
    """Return the value addressed by ``path``.

    Args:
        table: Table to read.
        path: Dotted path; ``''`` returns the whole table as a nested dict.
        default: Returned when nothing is stored at ``path``. It goes through
            ``encode_value`` then ``decode_value`` like stored data, so
            ``42`` comes back as ``'42'`` unless ``options.parse`` is set.
            ``None`` means no default.
        options: Read options.

    Returns:
        A decoded leaf value, a nested dict for a branch, the processed
        default, or None.
    """
    root = assemble(table, matched_keys(table, path, options), options)

    if not path:
        found = root
    elif isinstance(root, EnvTree):
        found = root.get_item(fold_path(path, options.case_sensitive), _MISSING)
    else:
        found = _MISSING

    if found is _MISSING:
        if default is None:
            return None
        found = encode_value(default, options)
    elif isinstance(found, EnvTree):
        found = found.as_dict()

    return decode_value(found, options)
