# -*- coding: utf-8 -*-
"""streaming_ta core – ``Action``, the quantized trade signal.

An action is ``Buy(m)``, ``None`` or ``Sell(m)`` with ``m`` an integer in
``[0, BOUND]``.  It can be read as an *analog* sign in {-1, 0, 1} or as a
*ratio* in [-1.0, 1.0] (None has no ratio).

Float ratios are quantized with ``round(|ratio| * BOUND)`` (half away from
zero) after clamping to [-1, 1]; the sign bit picks the direction, so
``-0.0`` becomes ``Sell(0)``.  Converting back and forth is stable on the
quantization grid only.

Equality is as follows and is relied upon elsewhere:

    Buy(0) == Sell(0)      True   (zero strength, direction slot used)
    None   == Buy(0)       False
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Optional

from ._base import _is_nan

BOUND = 255

_BUY = 1
_NONE = 0
_SELL = -1


@dataclass(frozen=True, eq=False)
class Action:
    """Use the constructors (``buy``, ``sell``, ``from_ratio``, …) instead of
    building instances directly."""

    direction: int = _NONE
    amount: int = 0

    NONE = None       # type: Action
    BUY_ALL = None    # type: Action
    SELL_ALL = None   # type: Action

    # -----------------------------------------------------------------------
    # Constructors
    # -----------------------------------------------------------------------

    @classmethod
    def buy(cls, magnitude: int) -> "Action":
        assert 0 <= magnitude <= BOUND, f"Action magnitude {magnitude} out of [0, {BOUND}]"
        return cls(_BUY, int(magnitude))

    @classmethod
    def sell(cls, magnitude: int) -> "Action":
        assert 0 <= magnitude <= BOUND, f"Action magnitude {magnitude} out of [0, {BOUND}]"
        return cls(_SELL, int(magnitude))

    @classmethod
    def from_bool(cls, value: bool) -> "Action":
        """True -> BUY_ALL, False -> NONE."""
        return cls.BUY_ALL if value else cls.NONE

    @classmethod
    def from_analog(cls, value: Optional[int]) -> "Action":
        """Any positive -> BUY_ALL, any negative -> SELL_ALL, 0 / None -> NONE."""
        if not value:
            return cls.NONE
        return cls.BUY_ALL if value > 0 else cls.SELL_ALL

    @classmethod
    def from_ratio(cls, value: Optional[float]) -> "Action":
        """Quantize a ratio in [-1.0, 1.0]; NaN and None give NONE."""
        ratio = None if value is None else float(value)
        if _is_nan(ratio):
            return cls.NONE
        normalized = min(max(ratio, -1.0), 1.0)
        magnitude = int(math.floor(abs(normalized) * BOUND + 0.5))
        if math.copysign(1.0, normalized) < 0.0:
            return cls(_SELL, magnitude)
        return cls(_BUY, magnitude)

    @classmethod
    def of(cls, value: Any) -> "Action":
        """Dispatch on the type of *value*: bool, int (analog), float (ratio)."""
        if isinstance(value, Action):
            return value
        if value is None:
            return cls.NONE
        if isinstance(value, bool):
            return cls.from_bool(value)
        if isinstance(value, Integral):
            return cls.from_analog(int(value))
        if isinstance(value, Real):
            return cls.from_ratio(float(value))
        raise TypeError(f"Cannot convert {type(value).__name__} to Action")

    # -----------------------------------------------------------------------
    # Views
    # -----------------------------------------------------------------------

    @property
    def magnitude(self) -> Optional[int]:
        """Internal quantized value, None when there is no signal."""
        if self.direction == _NONE:
            return None
        return self.amount

    def ratio(self) -> Optional[float]:
        """Value in [-1.0, 1.0], None when there is no signal."""
        if self.direction == _NONE:
            return None
        return self.direction * self.amount / BOUND

    def analog(self) -> int:
        """1 or -1 for a non-zero signal, otherwise 0."""
        if self.amount == 0:
            return 0
        return self.direction

    def sign(self) -> Optional[int]:
        """Like :meth:`analog` but None when there is no signal."""
        if self.direction == _NONE:
            return None
        return self.analog()

    def is_none(self) -> bool:
        return self.direction == _NONE

    def is_some(self) -> bool:
        return self.direction != _NONE

    # -----------------------------------------------------------------------
    # Algebra
    # -----------------------------------------------------------------------

    def __neg__(self) -> "Action":
        if self.direction == _NONE:
            return self
        return Action(-self.direction, self.amount)

    def __sub__(self, other: "Action") -> "Action":
        if not isinstance(other, Action):
            return NotImplemented
        if other.direction == _NONE:
            return self
        if self.direction == _NONE:
            return -other
        if self.direction == other.direction:
            # Buy(a) - Buy(b) keeps the direction while a >= b, flips otherwise
            if self.amount >= other.amount:
                return Action(self.direction, self.amount - other.amount)
            return Action(-self.direction, other.amount - self.amount)
        return Action(self.direction, min(self.amount + other.amount, BOUND))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        if self.direction == _NONE or other.direction == _NONE:
            return self.direction == other.direction
        if self.amount == 0 and other.amount == 0:
            return True
        return self.direction == other.direction and self.amount == other.amount

    def __hash__(self) -> int:
        if self.direction != _NONE and self.amount == 0:
            return hash(("zero",))
        return hash((self.direction, self.amount))

    def __repr__(self) -> str:
        if self.direction == _NONE:
            return "N"
        return f"{'+' if self.direction == _BUY else '-'}{self.amount}"

    def __str__(self) -> str:
        if self.direction == _NONE:
            return "N"
        return f"{'+' if self.direction == _BUY else '-'}{self.amount / BOUND:.2f}"


Action.NONE = Action(_NONE, 0)
Action.BUY_ALL = Action(_BUY, BOUND)
Action.SELL_ALL = Action(_SELL, BOUND)
