# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""EnvTree package - ephemeral nested view rebuilt on every read.

Example:
    >>> from env_dot_prop.tree import EnvTree
    >>> tree = EnvTree()
    >>> tree.set_item('config.name', 'MyApp')
    >>> tree['config.name']
    'MyApp'
"""

from .core import EnvTree
from .node import EnvTreeNode

__all__ = ["EnvTree", "EnvTreeNode"]
