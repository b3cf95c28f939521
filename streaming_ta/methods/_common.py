# -*- coding: utf-8 -*-
"""Parameter checks shared by the method modules."""
from __future__ import annotations

import math
from numbers import Integral
from typing import Any

from ..core import InvalidCandles, WrongMethodParameters


def _check_length(length: Any, name: str, minimum: int = 1) -> int:
    """Return *length* as int or raise WrongMethodParameters."""
    if isinstance(length, bool) or not isinstance(length, Integral) or length < minimum:
        raise WrongMethodParameters(f"{name}: length should be an int >= {minimum}, got {length!r}")
    return int(length)


def _check_finite(value: float, name: str) -> float:
    """Seed values of window-searching methods must be finite."""
    if not math.isfinite(value):
        raise InvalidCandles(f"{name}: initial value must be finite, got {value!r}")
    return value
