# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""EnvDotProp - get, set, delete and test nested paths over a flat table.

Example:
    Bound to a plain dict::

        env = EnvDotProp({'DB_HOST': 'localhost', 'DB_PORT': '5432'})
        env.get('db')                      # {'host': 'localhost', 'port': '5432'}
        env.set('db.port', 6543, stringify=True)
        env.get('db.port', parse=True)     # 6543

    Module level, over ``os.environ``::

        import env_dot_prop
        env_dot_prop.set('app.debug', True)
        env_dot_prop.get('app.debug', parse=True)  # True
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, Union

from .assembler import read
from .codec import fold_key, fold_path, to_key_form, to_path_form
from .matcher import matched_keys
from .options import Options, OptionsLike
from .table import EnvironTable, Table
from .values import encode_value

logger = logging.getLogger(__name__)

TableLike = Union[Table, MutableMapping[str, str], None]


class EnvDotProp:
    """Dotted-path facade over a flat string table.

    Every call re-reads the table; nothing is cached.

    Attributes:
        table: The bound ``Table``.
        options: Default options merged under every call's options.
    """

    __slots__ = ('table', 'options')

    def __init__(
        self,
        table: TableLike = None,
        options: OptionsLike = None,
        **kwargs: Any,
    ) -> None:
        """Initialize an EnvDotProp.

        Args:
            table: A ``Table``, a mutable string mapping to wrap in an
                ``EnvironTable``, or None for ``os.environ``.
            options: Default options (``Options`` or mapping).
            **kwargs: Individual default option overrides.

        Raises:
            OptionsError: On unknown option names.
        """
        if table is None or isinstance(table, MutableMapping):
            table = EnvironTable(table)
        self.table: Table = table
        self.options = Options.coerce(options, **kwargs)

    def __repr__(self) -> str:
        return f"EnvDotProp({self.table!r}, {self.options!r})"

    def _options(self, options: OptionsLike, kwargs: dict[str, Any]) -> Options:
        return self.options.merge(options, **kwargs)

    def get(
        self,
        path: str,
        default: Any = None,
        options: OptionsLike = None,
        **kwargs: Any,
    ) -> Any:
        """Return the value or nested dict stored under ``path``.

        Args:
            path: Dotted path; ``''`` returns the whole table.
            default: Value used when nothing is stored at ``path``.
            options: Per-call options.
            **kwargs: Per-call option overrides.

        Example:
            >>> env = EnvDotProp({'FOO_BAR': '1', 'BAZ': '2'})
            >>> env.get('')
            {'baz': '2', 'foo': {'bar': '1'}}
            >>> env.get('missing', 42, parse=True)
            42
        """
        return read(self.table, path, default, self._options(options, kwargs))

    def set(
        self,
        path: str,
        value: Any,
        options: OptionsLike = None,
        **kwargs: Any,
    ) -> None:
        """Store ``value`` at ``path``, replacing everything beneath it.

        Args:
            path: Dotted path.
            value: Value to store; encoded to text (JSON with ``stringify``).
            options: Per-call options.
            **kwargs: Per-call option overrides.
        """
        opts = self._options(options, kwargs)
        key = fold_key(to_key_form(path), opts.case_sensitive)
        collapsed = self._delete(path, opts)
        self.table.set(key, encode_value(value, opts))
        logger.debug("Set %r as %r (replaced %d key(s))", path, key, collapsed)

    def delete(
        self,
        path: str,
        options: OptionsLike = None,
        **kwargs: Any,
    ) -> None:
        """Remove every key under ``path``; a no-op when there is none."""
        opts = self._options(options, kwargs)
        removed = self._delete(path, opts)
        logger.debug("Deleted %r (%d key(s))", path, removed)

    def _delete(self, path: str, options: Options) -> int:
        keys = matched_keys(self.table, path, options)
        for key in keys:
            self.table.delete(key)
        return len(keys)

    def has(
        self,
        path: str,
        options: OptionsLike = None,
        **kwargs: Any,
    ) -> bool:
        """True if at least one key is stored under ``path``."""
        return bool(matched_keys(self.table, path, self._options(options, kwargs)))

    def to_key(self, path: str, options: OptionsLike = None, **kwargs: Any) -> str:
        """Return the table key ``set`` would write for ``path``."""
        opts = self._options(options, kwargs)
        return fold_key(to_key_form(path), opts.case_sensitive)

    def to_path(self, key: str, options: OptionsLike = None, **kwargs: Any) -> str:
        """Return the dotted path a read reports for table ``key``."""
        opts = self._options(options, kwargs)
        return fold_path(to_path_form(key), opts.case_sensitive)


_default: EnvDotProp | None = None


def default_instance() -> EnvDotProp:
    """Return the shared EnvDotProp bound to ``os.environ``."""
    global _default
    if _default is None:
        _default = EnvDotProp()
    return _default


def get(path: str, default: Any = None, options: OptionsLike = None, **kwargs: Any) -> Any:
    """``EnvDotProp.get`` on ``os.environ``."""
    return default_instance().get(path, default, options, **kwargs)


def set(path: str, value: Any, options: OptionsLike = None, **kwargs: Any) -> None:
    """``EnvDotProp.set`` on ``os.environ``."""
    default_instance().set(path, value, options, **kwargs)


def delete(path: str, options: OptionsLike = None, **kwargs: Any) -> None:
    """``EnvDotProp.delete`` on ``os.environ``."""
    default_instance().delete(path, options, **kwargs)


def has(path: str, options: OptionsLike = None, **kwargs: Any) -> bool:
    """``EnvDotProp.has`` on ``os.environ``."""
    return default_instance().has(path, options, **kwargs)
