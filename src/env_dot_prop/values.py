# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value codec - optional JSON (de)serialization of leaf values.

Both directions are total: malformed input falls back to text and never
raises to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .options import DEFAULT_OPTIONS, Options

logger = logging.getLogger(__name__)


def to_text(value: Any) -> str:
    """Default textual coercion used when JSON is off or fails.

    Booleans and ``None`` use their JSON spelling so that a value written
    without ``stringify`` still reads back with ``parse``.

    Example:
        >>> to_text(True), to_text(None), to_text(42)
        ('true', 'null', '42')
    """
    if isinstance(value, str):
        return value
    if value is True:
        return 'true'
    if value is False:
        return 'false'
    if value is None:
        return 'null'
    return str(value)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def decode_value(raw: Any, options: Options = DEFAULT_OPTIONS) -> Any:
    """Decode a table value.

    Args:
        raw: Value to decode. Anything that is not a ``str`` is returned
            unchanged (already decoded, or a subtree).
        options: With ``parse`` set, text is decoded as JSON.

    Returns:
        The decoded value, or ``raw`` if it is not valid JSON. The
        non-standard literals ``NaN``, ``Infinity`` and ``-Infinity`` are
        not valid JSON and are kept as text.
    """
    if not isinstance(raw, str):
        return raw
    if not options.parse:
        return raw
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        logger.debug("Value is not JSON, keeping text (%d chars)", len(raw))
        return raw


def encode_value(value: Any, options: Options = DEFAULT_OPTIONS) -> str:
    """Encode a value as table text.

    Args:
        value: Value to encode. Strings are returned unchanged.
        options: With ``stringify`` set, values are encoded as compact JSON.
            Non-finite floats have no JSON form and fall back to text.

    Returns:
        Text suitable for the table.
    """
    if isinstance(value, str):
        return value
    if not options.stringify:
        return to_text(value)
    try:
        return json.dumps(
            value, separators=(',', ':'), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError):
        logger.debug(
            "Cannot encode %s as JSON, using text", type(value).__name__
        )
        return to_text(value)
