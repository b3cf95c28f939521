# -*- coding: utf-8 -*-
"""streaming_ta core – shared helpers and value types.

Every core module (``_window``, ``_method``, ``_action``, …) imports from
here.  Nothing in this module keeps state.
"""
from __future__ import annotations

import math
import os
from numbers import Integral, Real
from typing import Any

NAN = float("nan")

# Main value type for calculations and the type of period-like parameters.
ValueType = float
PeriodType = int


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _is_nan(x: Any) -> bool:
    """True when *x* is None or a NaN real (numpy scalars included)."""
    return x is None or (isinstance(x, Real) and not isinstance(x, Integral) and math.isnan(x))


_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def _as_bool(value: Any, default: bool) -> bool:
    """Loose bool parsing for env vars and ``set(name, value)`` strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        return bool(default)
    if value is None:
        return bool(default)
    return bool(value)


def _env_flag(name: str, default: bool = False) -> bool:
    return _as_bool(os.environ.get(name), default)


# ---------------------------------------------------------------------------
# Process-wide switches
# ---------------------------------------------------------------------------

# Picks the unchecked Window implementation in ``Window.create``.
UNSAFE_PERFORMANCE: bool = _env_flag("STREAMING_TA_UNSAFE_PERFORMANCE")
