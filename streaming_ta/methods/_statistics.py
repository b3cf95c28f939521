# -*- coding: utf-8 -*-
"""streaming_ta methods – window statistics.

Registered kinds
----------------
st_dev, highest, lowest, highest_lowest_delta, mean_abs_dev, median_abs_dev,
cci, volatility
"""
from __future__ import annotations

import math

from ..core import Method, Window
from ._common import _check_finite, _check_length
from ._overlap import SMA, SMM


# ===========================================================================
# StDev  -- sample standard deviation (ddof=1) over the window
# ===========================================================================
# Running sums of x and x^2.  ``mean`` is kept negated so the variance
# numerator is sq_sum + sum * mean.

class StDev(Method):
    """Moving standard deviation.  Requires ``length >= 2``."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "StDev", minimum=2)
        float_length = float(length)
        self.k = 1.0 / (length - 1)
        self.mean = -value
        self.divider = -1.0 / float_length
        self.val_sum = value * float_length
        self.sq_val_sum = value * value * float_length
        self.window: Window[float] = Window.create(length, float(value))

    def next(self, value: float) -> float:
        prev_value = self.window.push(value)
        diff = value - prev_value

        # value**2 - prev_value**2
        self.sq_val_sum += diff * (value + prev_value)
        self.val_sum += diff
        self.mean += diff * self.divider

        total = self.val_sum * self.mean + self.sq_val_sum
        # rounding can leave a tiny negative number near zero
        return math.sqrt(abs(total * self.k))


# ===========================================================================
# Highest / Lowest / HighestLowestDelta
# ===========================================================================
# The current extremum is kept as a scalar; the window is rescanned only
# when the extremum itself leaves the window.  NaN is not in the domain.

class Highest(Method):
    """Highest value over the window."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "Highest")
        self.value = _check_finite(float(value), "Highest")
        self.window: Window[float] = Window.create(length, self.value)

    def next(self, value: float) -> float:
        assert math.isfinite(value), "Highest method cannot operate with NAN values"

        left_value = self.window.push(value)
        if value >= self.value:
            self.value = value
        elif left_value == self.value:
            self.value = max(self.window.iter())
        return self.value


class Lowest(Method):
    """Lowest value over the window."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "Lowest")
        self.value = _check_finite(float(value), "Lowest")
        self.window: Window[float] = Window.create(length, self.value)

    def next(self, value: float) -> float:
        assert math.isfinite(value), "Lowest method cannot operate with NAN values"

        left_value = self.window.push(value)
        if value <= self.value:
            self.value = value
        elif left_value == self.value:
            self.value = min(self.window.iter())
        return self.value


class HighestLowestDelta(Method):
    """Highest minus lowest value over the window."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "HighestLowestDelta")
        value = _check_finite(float(value), "HighestLowestDelta")
        self.highest = value
        self.lowest = value
        self.window: Window[float] = Window.create(length, value)

    def next(self, value: float) -> float:
        assert math.isfinite(value), "HighestLowestDelta method cannot operate with NAN values"

        left_value = self.window.push(value)

        search = False
        if value >= self.highest:
            self.highest = value
        elif left_value == self.highest:
            search = True

        if value <= self.lowest:
            self.lowest = value
        elif left_value == self.lowest:
            search = True

        if search:
            self.lowest = min(self.window.iter())
            self.highest = max(self.window.iter())

        return self.highest - self.lowest


# ===========================================================================
# Index of the extremum
# ===========================================================================
# Output is how many steps back the most recent highest (lowest) value
# sits: 0 for the current value, ``length - 1`` at most.  Ties resolve to
# the newer value.

class HighestIndex(Method):
    """Steps back to the highest value of the window."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "HighestIndex")
        self.value = _check_finite(float(value), "HighestIndex")
        self.index = 0
        self.window: Window[float] = Window.create(length, self.value)

    def next(self, value: float) -> int:
        assert math.isfinite(value), "HighestIndex method cannot operate with NAN values"

        self.window.push(value)
        self.index += 1

        if value >= self.value:
            self.value = value
            self.index = 0
        elif self.index == len(self.window):
            self.value = value
            self.index = 0
            for i, x in enumerate(self.window.iter()):
                if x > self.value:
                    self.value = x
                    self.index = i
        return self.index


class LowestIndex(Method):
    """Steps back to the lowest value of the window."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "LowestIndex")
        self.value = _check_finite(float(value), "LowestIndex")
        self.index = 0
        self.window: Window[float] = Window.create(length, self.value)

    def next(self, value: float) -> int:
        assert math.isfinite(value), "LowestIndex method cannot operate with NAN values"

        self.window.push(value)
        self.index += 1

        if value <= self.value:
            self.value = value
            self.index = 0
        elif self.index == len(self.window):
            self.value = value
            self.index = 0
            for i, x in enumerate(self.window.iter()):
                if x < self.value:
                    self.value = x
                    self.index = i
        return self.index


# ===========================================================================
# Deviations
# ===========================================================================
# MeanAbsDev  : mean(|x_i - sma|)     over the window
# MedianAbsDev: mean(|x_i - median|)  over the window
# CCI         : (x - sma) / MeanAbsDev, 0 while the deviation is 0

class MeanAbsDev(Method):
    """Mean absolute deviation from the moving average."""

    def __init__(self, length: int, value: float) -> None:
        self.sma = SMA(length, value)

    def next(self, value: float) -> float:
        mean = self.sma.next(value)
        total = 0.0
        for x in self.sma.get_window().iter():
            total += abs(x - mean)
        return total * self.sma.divider


class MedianAbsDev(Method):
    """Mean absolute deviation from the moving median.  Requires
    ``length >= 2``; NaN is not in the domain."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "MedianAbsDev", minimum=2)
        self.smm = SMM(length, value)
        self.divider = 1.0 / length

    def next(self, value: float) -> float:
        median = self.smm.next(value)
        total = 0.0
        for x in self.smm.get_window().iter():
            total += abs(x - median)
        return total * self.divider


class CCI(Method):
    """Commodity channel index without the Lambert 0.015 scaling."""

    def __init__(self, length: int, value: float) -> None:
        self.mad = MeanAbsDev(length, value)

    def next(self, value: float) -> float:
        mad = self.mad.next(value)
        if mad > 0.0:
            return (value - self.mad.sma.get_last_value()) / mad
        return 0.0


# ===========================================================================
# LinearVolatility  -- sum of |x - x_prev| over the window
# ===========================================================================

class LinearVolatility(Method):
    """Path length of the series over the last ``length`` steps."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "LinearVolatility")
        self.prev_value = float(value)
        self.volatility = 0.0
        self.window: Window[float] = Window.create(length, 0.0)

    def next(self, value: float) -> float:
        derivative = abs(value - self.prev_value)
        self.prev_value = value
        self.volatility += derivative - self.window.push(derivative)
        return self.volatility


Volatility = LinearVolatility
