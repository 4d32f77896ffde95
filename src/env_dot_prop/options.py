# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Options record shared by every env-dot-prop operation.

Options are layered, lowest to highest priority:

- field defaults
- defaults bound to an ``EnvDotProp`` instance
- the ``options`` argument of a call (``Options`` or mapping)
- keyword overrides of a call

Example:
    >>> opts = Options.coerce({'caseSensitive': True}, parse=True)
    >>> opts.case_sensitive, opts.parse
    (True, True)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Union

from .exceptions import OptionsError

# camelCase spellings accepted in option mappings.
_ALIASES = {
    'caseSensitive': 'case_sensitive',
    'strictPrefix': 'strict_prefix',
}


@dataclass(frozen=True)
class Options:
    """Immutable configuration for path encoding and value (de)serialization.

    Attributes:
        case_sensitive: Compare and build keys verbatim instead of folding
            them to uppercase (paths to lowercase).
        parse: Decode table values as JSON when reading.
        stringify: Encode non-string values as JSON when writing.
        strict_prefix: Only match keys whose next character after the
            encoded path is a segment boundary. Off by default, so path
            ``foo`` also matches key ``FOOD``.
    """

    case_sensitive: bool = False
    parse: bool = False
    stringify: bool = False
    strict_prefix: bool = False

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @staticmethod
    def _normalize(values: Mapping[str, Any]) -> dict[str, bool]:
        allowed = Options.field_names()
        result: dict[str, bool] = {}
        for name, value in values.items():
            name = _ALIASES.get(name, name)
            if name not in allowed:
                raise OptionsError(
                    f"Unknown option '{name}', expected one of {sorted(allowed)}"
                )
            if not isinstance(value, bool):
                raise OptionsError(
                    f"Option '{name}' must be a bool, not {type(value).__name__}"
                )
            result[name] = value
        return result

    def merge(
        self, _options: OptionsLike = None, **kwargs: Any
    ) -> Options:
        """Return a copy with ``_options`` and ``kwargs`` applied on top.

        Args:
            _options: ``Options`` instance or mapping of option values.
            **kwargs: Individual overrides, applied last.

        Raises:
            OptionsError: On an unknown option name, a non-bool option value
                or a non-mapping ``_options``.
        """
        updates: dict[str, bool] = {}
        if isinstance(_options, Options):
            updates.update(
                (f.name, getattr(_options, f.name)) for f in fields(_options)
            )
        elif isinstance(_options, Mapping):
            updates.update(self._normalize(_options))
        elif _options is not None:
            raise OptionsError(
                f"options must be Options, a mapping or None, "
                f"not {type(_options).__name__}"
            )
        updates.update(self._normalize(kwargs))
        if not updates:
            return self
        return replace(self, **updates)

    @classmethod
    def coerce(cls, _options: OptionsLike = None, **kwargs: Any) -> Options:
        """Build an ``Options`` from any accepted form, starting from defaults."""
        if isinstance(_options, Options) and not kwargs:
            return _options
        return cls().merge(_options, **kwargs)


OptionsLike = Union[Options, Mapping[str, Any], None]

DEFAULT_OPTIONS = Options()
