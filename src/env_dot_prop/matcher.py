# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Key matcher - find every table key under a path."""

from __future__ import annotations

import logging

from .codec import ESCAPE, KEY_SEPARATOR, fold_key, to_key_form
from .options import DEFAULT_OPTIONS, Options
from .table import Table

logger = logging.getLogger(__name__)


def key_prefix(path: str, options: Options = DEFAULT_OPTIONS) -> str:
    """Return the encoded, case-folded key prefix for ``path``."""
    return fold_key(to_key_form(path), options.case_sensitive)


def _at_boundary(candidate: str, prefix: str) -> bool:
    if not prefix or len(candidate) == len(prefix):
        return True
    return candidate[len(prefix)] == KEY_SEPARATOR and not prefix.endswith(ESCAPE)


def matched_keys(
    table: Table, path: str, options: Options = DEFAULT_OPTIONS
) -> list[str]:
    """Return the table keys whose encoded form starts with ``path``.

    The comparison is a raw string prefix test: ``foo`` matches ``FOO_BAR``
    and also ``FOOD``, unless ``options.strict_prefix`` is set, in which case
    the key must end at the prefix or continue with an unescaped ``_``.
    The empty path matches every key.

    Args:
        table: Table to enumerate.
        path: Dotted path.
        options: ``case_sensitive`` and ``strict_prefix`` are honoured.

    Returns:
        Matching keys as stored in the table, in enumeration order.
    """
    prefix = key_prefix(path, options)
    result: list[str] = []
    for key in table.keys():
        candidate = fold_key(key, options.case_sensitive)
        if not candidate.startswith(prefix):
            continue
        if options.strict_prefix and not _at_boundary(candidate, prefix):
            continue
        result.append(key)
    logger.debug(
        "Path %r (prefix %r) matched %d key(s)", path, prefix, len(result)
    )
    return result
