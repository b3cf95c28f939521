# -*- coding: utf-8 -*-
"""streaming_ta methods – lagged values and differences.

Registered kinds
----------------
past (move), momentum (change), rate_of_change (roc), derivative, integral

TSI takes a ``(short, long)`` pair instead of a single length.
"""
from __future__ import annotations

from typing import Any, Tuple

from ..core import Method, Window, WrongMethodParameters
from ._common import _check_length
from ._overlap import EMA


class Past(Method):
    """Value from ``length`` steps ago (the seed until then).

    Works for any value type, bars included.
    """

    def __init__(self, length: int, value: Any) -> None:
        length = _check_length(length, "Past")
        self.window: Window[Any] = Window.create(length, value)

    def next(self, value: Any) -> Any:
        return self.window.push(value)


Move = Past


class Momentum(Method):
    """x - x[length ago]."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "Momentum")
        self.window: Window[float] = Window.create(length, float(value))

    def next(self, value: float) -> float:
        return value - self.window.push(value)


Change = Momentum
MTM = Momentum


class RateOfChange(Method):
    """(x - x[length ago]) / x[length ago].

    A zero value leaving the window gives ±inf or NaN, as float division does.
    """

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "RateOfChange")
        self.window: Window[float] = Window.create(length, float(value))

    def next(self, value: float) -> float:
        prev_value = self.window.push(value)
        if prev_value == 0.0:
            if value == 0.0 or value != value:
                return float("nan")
            return float("inf") if value > 0.0 else float("-inf")
        return (value - prev_value) / prev_value


ROC = RateOfChange


class Derivative(Method):
    """(x - x[length ago]) / length."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "Derivative")
        self.divider = 1.0 / length
        self.window: Window[float] = Window.create(length, float(value))

    def next(self, value: float) -> float:
        prev_value = self.window.push(value)
        return (value - prev_value) * self.divider


Differential = Derivative


# ===========================================================================
# Integral  -- moving sum
# ===========================================================================
# length == 0 keeps no window: the output is the running total of all
# inputs.  Otherwise the sum starts at value * length (seed-filled window).

class Integral(Method):
    """Sum of the last ``length`` values, or of all values when length is 0."""

    def __init__(self, length: int = 0, value: float = 0.0) -> None:
        length = _check_length(length, "Integral", minimum=0)
        self.value = float(value) * length
        self.window: Window[float] = Window.create(length, float(value))

    def next(self, value: float) -> float:
        self.value += value
        if not self.window.is_empty():
            self.value -= self.window.push(value)
        return self.value


Sum = Integral


# ===========================================================================
# TSI  -- True Strength Index
# ===========================================================================
# m   = x - x_prev
# tsi = EMA_short(EMA_long(m)) / EMA_short(EMA_long(|m|)),  0 while flat

class TSI(Method):
    """True strength index over ``(short, long)`` periods, in [-1, 1]."""

    def __init__(self, periods: Tuple[int, int], value: float) -> None:
        try:
            short, long = periods
        except (TypeError, ValueError):
            raise WrongMethodParameters(f"TSI: expected (short, long) periods, got {periods!r}") from None
        self.ema11 = EMA(long, 0.0)
        self.ema12 = EMA(short, 0.0)
        self.ema21 = EMA(long, 0.0)
        self.ema22 = EMA(short, 0.0)
        self.last_value = float(value)

    def next(self, value: float) -> float:
        momentum = value - self.last_value
        self.last_value = value

        numerator = self.ema12.next(self.ema11.next(momentum))
        denominator = self.ema22.next(self.ema21.next(abs(momentum)))
        if denominator > 0.0:
            return numerator / denominator
        return 0.0


TrueStrengthIndex = TSI
