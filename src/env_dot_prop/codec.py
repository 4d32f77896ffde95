# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path codec - translation between dotted paths and flat table keys.

A path uses ``.`` between segments and a key uses ``_``. Each direction
escapes the *other* side's delimiter so that the translation is lossless:

- ``to_key_form``: ``_`` becomes ``\\_``, ``.`` becomes ``_`` and ``\\.``
  becomes a literal ``.``
- ``to_path_form``: ``.`` becomes ``\\.``, ``_`` becomes ``.`` and ``\\_``
  becomes a literal ``_``

Example:
    >>> to_key_form('foo.und_und')
    'foo_und\\\\_und'
    >>> to_path_form('FOO_DOT.DOT')
    'FOO.DOT\\\\.DOT'
"""

from __future__ import annotations

PATH_SEPARATOR = '.'
KEY_SEPARATOR = '_'
ESCAPE = '\\'


def transform(text: str, source: str, target: str) -> str:
    """Convert ``source``-delimited text to ``target``-delimited text.

    Single left-to-right scan. A literal ``target`` is escaped, a literal
    ``source`` becomes ``target``, and an escaped ``source`` is unescaped.
    Every other character is copied. Any input is accepted.

    Args:
        text: Text to convert.
        source: Delimiter used in ``text``.
        target: Delimiter to produce.

    Returns:
        The converted text.
    """
    out: list[str] = []
    escaped_target = ESCAPE + target
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == target:
            out.append(escaped_target)
        elif char == source:
            out.append(target)
        elif char == ESCAPE and i + 1 < length and text[i + 1] == source:
            out.append(source)
            i += 1
        else:
            out.append(char)
        i += 1
    return ''.join(out)


def to_key_form(path: str) -> str:
    """Convert a dotted path to an underscore-joined table key."""
    return transform(path, PATH_SEPARATOR, KEY_SEPARATOR)


def to_path_form(key: str) -> str:
    """Convert an underscore-joined table key to a dotted path."""
    return transform(key, KEY_SEPARATOR, PATH_SEPARATOR)


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments, honouring ``\\.`` escapes.

    A piece ending in a backslash is joined to the following piece with a
    literal dot. Other backslashes are kept as they are.

    Example:
        >>> split_path('foo.dot\\\\.dot')
        ['foo', 'dot.dot']
        >>> split_path('')
        []
    """
    if not path:
        return []
    pieces = path.split(PATH_SEPARATOR)
    segments: list[str] = []
    i = 0
    while i < len(pieces):
        segment = pieces[i]
        while segment.endswith(ESCAPE) and i + 1 < len(pieces):
            i += 1
            segment = segment[:-1] + PATH_SEPARATOR + pieces[i]
        segments.append(segment)
        i += 1
    return segments


def fold_key(key: str, case_sensitive: bool = False) -> str:
    """Return the canonical (uppercase unless case sensitive) form of a key."""
    return key if case_sensitive else key.upper()


def fold_path(path: str, case_sensitive: bool = False) -> str:
    """Return the canonical (lowercase unless case sensitive) form of a path."""
    return path if case_sensitive else path.lower()
