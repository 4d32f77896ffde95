# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""env-dot-prop - Nested dotted-path access over a flat environment table.

Reads rebuild a nested view of every key under a path; writes collapse
whatever was under the path into a single key. Keys are uppercase and
``_``-joined unless case sensitivity is requested.

Example:
    >>> import env_dot_prop
    >>> env_dot_prop.set('app.db.host', 'localhost')   # APP_DB_HOST
    >>> env_dot_prop.get('app.db')
    {'host': 'localhost'}
"""

import logging

__version__ = "0.1.0"

from .codec import split_path, to_key_form, to_path_form
from .envprop import EnvDotProp, delete, get, has, set
from .exceptions import EnvDotPropError, OptionsError
from .options import Options
from .table import EnvironTable, Table
from .tree import EnvTree, EnvTreeNode
from .values import decode_value, encode_value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Operations on os.environ
    "get",
    "set",
    "delete",
    "has",
    # Core classes
    "EnvDotProp",
    "Options",
    "Table",
    "EnvironTable",
    "EnvTree",
    "EnvTreeNode",
    # Codecs
    "to_key_form",
    "to_path_form",
    "split_path",
    "encode_value",
    "decode_value",
    # Exceptions
    "EnvDotPropError",
    "OptionsError",
]
