# -*- coding: utf-8 -*-
"""streaming_ta methods – crossing detectors.

Input is a pair ``(value1, value2)``, output an :class:`Action`.  The
parameter is unused; pass ``None``.

    CrossAbove: previous delta < 0 and current delta >= 0   -> BUY_ALL
    CrossUnder: previous delta > 0 and current delta <= 0   -> BUY_ALL
    Cross     : CrossAbove - CrossUnder as an analog signal

Reverse signals take a float input and ``(left, right)`` bar counts; see
:class:`ReverseSignal`.
"""
from __future__ import annotations

from typing import Any, Tuple

from ..core import Action, Method, Window, WrongMethodParameters
from ._common import _check_length


class CrossAbove(Method):
    """Detects ``value1`` crossing ``value2`` upwards."""

    def __init__(self, params: Any = None, value: Tuple[float, float] = (0.0, 0.0)) -> None:
        self.last_delta = value[0] - value[1]

    def binary(self, value1: float, value2: float) -> bool:
        last_delta = self.last_delta
        current_delta = value1 - value2
        self.last_delta = current_delta
        return last_delta < 0.0 and current_delta >= 0.0

    def next(self, value: Tuple[float, float]) -> Action:
        return Action.from_bool(self.binary(value[0], value[1]))


class CrossUnder(Method):
    """Detects ``value1`` crossing ``value2`` downwards."""

    def __init__(self, params: Any = None, value: Tuple[float, float] = (0.0, 0.0)) -> None:
        self.last_delta = value[0] - value[1]

    def binary(self, value1: float, value2: float) -> bool:
        last_delta = self.last_delta
        current_delta = value1 - value2
        self.last_delta = current_delta
        return last_delta > 0.0 and current_delta <= 0.0

    def next(self, value: Tuple[float, float]) -> Action:
        return Action.from_bool(self.binary(value[0], value[1]))


class Cross(Method):
    """BUY_ALL on an upward cross, SELL_ALL on a downward one, else NONE."""

    def __init__(self, params: Any = None, value: Tuple[float, float] = (0.0, 0.0)) -> None:
        self.up = CrossAbove(None, value)
        self.down = CrossUnder(None, value)

    def next(self, value: Tuple[float, float]) -> Action:
        up = self.up.binary(value[0], value[1])
        down = self.down.binary(value[0], value[1])
        return Action.from_bool(up) - Action.from_bool(down)


# ===========================================================================
# Reverse signals  -- local extremum confirmed ``right`` bars later
# ===========================================================================
# A value is a pivot high when it is the highest (newest on ties) of the
# ``left`` values before it and the ``right`` values after it.  The window
# holds those ``left + right + 1`` values; seeds sit at negative positions.
# Positions are absolute step numbers so the extremum is rescanned only
# after it leaves the window.

def _check_sides(params: Any, name: str) -> Tuple[int, int]:
    try:
        left, right = params
    except (TypeError, ValueError):
        raise WrongMethodParameters(f"{name}: expected (left, right), got {params!r}") from None
    return _check_length(left, name), _check_length(right, name)


class ReverseHighSignal(Method):
    """BUY_ALL when the value ``right`` steps back is a local maximum."""

    def __init__(self, params: Tuple[int, int], value: float) -> None:
        self.left, self.right = _check_sides(params, type(self).__name__)
        self.window: Window[float] = Window.create(self.left + self.right + 1, float(value))
        self.index = 0
        self.extremum = float(value)
        self.extremum_index = -1

    def _better(self, value: float, current: float) -> bool:
        return value >= current

    def next(self, value: float) -> Action:
        self.window.push(value)
        first_index = self.index - len(self.window) + 1

        if self.extremum_index < first_index:
            positions = enumerate(self.window.iter_rev(), start=first_index)
            self.extremum_index, self.extremum = next(positions)
            for position, x in positions:
                if self._better(x, self.extremum):
                    self.extremum = x
                    self.extremum_index = position
        elif self._better(value, self.extremum):
            self.extremum = value
            self.extremum_index = self.index

        found = self.index >= self.right and self.extremum_index == self.index - self.right
        self.index += 1
        return Action.from_bool(found)


PivotHighSignal = ReverseHighSignal


class ReverseLowSignal(ReverseHighSignal):
    """BUY_ALL when the value ``right`` steps back is a local minimum."""

    def _better(self, value: float, current: float) -> bool:
        return value <= current


PivotLowSignal = ReverseLowSignal


class ReverseSignal(Method):
    """BUY_ALL on a confirmed local minimum, SELL_ALL on a local maximum."""

    def __init__(self, params: Tuple[int, int], value: float) -> None:
        self.high = ReverseHighSignal(params, value)
        self.low = ReverseLowSignal(params, value)

    def next(self, value: float) -> Action:
        return self.low.next(value) - self.high.next(value)


PivotSignal = ReverseSignal
