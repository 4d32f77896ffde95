# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""env-dot-prop exceptions."""

from __future__ import annotations


class EnvDotPropError(Exception):
    """Base exception for env-dot-prop errors."""

    pass


class OptionsError(EnvDotPropError, TypeError):
    """Raised when options are built from an unknown field or a bad value."""

    pass
