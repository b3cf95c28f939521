# -*- coding: utf-8 -*-
"""streaming_ta methods – moving averages.

Every class here takes ``(length, value)`` and maps a float to a float,
except VWMA which reads ``(value, volume)`` pairs.  Windows are seeded
with ``value`` so the first outputs are averages over the seed, never over
a shrinking window.

Domain: finite floats.  A NaN input is accepted but poisons the running
aggregates of SMA / WMA / Conv for as long as it stays inside the window
(forever for the exponential family).  SMM rejects NaN.
"""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from ..core import Method, Window, WrongMethodParameters
from ._common import _check_finite, _check_length


# ===========================================================================
# SMA  -- Simple Moving Average
# ===========================================================================
# sma += (x - x[length ago]) / length

class SMA(Method):
    """Simple moving average."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "SMA")
        self.divider = 1.0 / length
        self.value = float(value)
        self.window: Window[float] = Window.create(length, float(value))

    def next(self, value: float) -> float:
        prev_value = self.window.push(value)
        self.value += (value - prev_value) * self.divider
        return self.value

    def get_window(self) -> Window[float]:
        return self.window

    def get_last_value(self) -> float:
        return self.value


# ===========================================================================
# WMA  -- Weighted Moving Average (newest weight = length, oldest = 1)
# ===========================================================================
# Running form: the numerator gains length*x and loses the plain sum of the
# window (every weight drops by one).  ``total`` holds -sum(window).

class WMA(Method):
    """Linearly weighted moving average."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "WMA")
        weight_sum = length * (length + 1) // 2
        self.invert_sum = 1.0 / weight_sum
        self.float_length = float(length)
        self.total = -value * self.float_length
        self.numerator = value * weight_sum
        self.window: Window[float] = Window.create(length, float(value))

    def next(self, value: float) -> float:
        prev_value = self.window.push(value)
        self.numerator += self.float_length * value + self.total
        self.total += prev_value - value
        return self.numerator * self.invert_sum


# ===========================================================================
# EMA family
# ===========================================================================
# EMA : alpha = 2 / (length + 1),  ema += (x - ema) * alpha
# DMA : EMA(EMA(x))                 TMA : EMA(EMA(EMA(x)))
# DEMA: 2*ema - EMA(ema)            TEMA: 3*(ema - dma) + EMA(dma)

class EMA(Method):
    """Exponential moving average seeded with the initial value."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "EMA")
        self.alpha = 2.0 / (length + 1)
        self.value = float(value)

    def next(self, value: float) -> float:
        self.value = (value - self.value) * self.alpha + self.value
        return self.value


class DMA(Method):
    """Double exponential moving average: EMA of EMA."""

    def __init__(self, length: int, value: float) -> None:
        self.ema = EMA(length, value)
        self.dma = EMA(length, value)

    def next(self, value: float) -> float:
        return self.dma.next(self.ema.next(value))


class TMA(Method):
    """Triple exponential moving average: EMA of EMA of EMA."""

    def __init__(self, length: int, value: float) -> None:
        self.dma = DMA(length, value)
        self.tma = EMA(length, value)

    def next(self, value: float) -> float:
        return self.tma.next(self.dma.next(value))


class DEMA(Method):
    """Lag-reduced double exponential moving average."""

    def __init__(self, length: int, value: float) -> None:
        self.ema = EMA(length, value)
        self.dma = EMA(length, value)

    def next(self, value: float) -> float:
        ema = self.ema.next(value)
        dma = self.dma.next(ema)
        return 2.0 * ema - dma


class TEMA(Method):
    """Lag-reduced triple exponential moving average."""

    def __init__(self, length: int, value: float) -> None:
        self.ema = EMA(length, value)
        self.dma = EMA(length, value)
        self.tma = EMA(length, value)

    def next(self, value: float) -> float:
        ema = self.ema.next(value)
        dma = self.dma.next(ema)
        tma = self.tma.next(dma)
        return 3.0 * (ema - dma) + tma


# ===========================================================================
# RMA / WSMA  -- Wilder's smoothing
# ===========================================================================
# RMA : alpha = 1 / length
# WSMA: EMA with length 2*length - 1 (same alpha as RMA)

class RMA(Method):
    """Running moving average (a.k.a. MMA, SMMA)."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "RMA")
        self.alpha = 1.0 / length
        self.alpha_rev = 1.0 - self.alpha
        self.prev_value = float(value)

    def next(self, value: float) -> float:
        self.prev_value = self.alpha * value + self.alpha_rev * self.prev_value
        return self.prev_value


MMA = RMA
SMMA = RMA


class WSMA(Method):
    """Wilder's smoothing average."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "WSMA")
        self.ema = EMA(2 * length - 1, value)

    def next(self, value: float) -> float:
        return self.ema.next(value)


# ===========================================================================
# SMM  -- Simple Moving Median
# ===========================================================================
# Keeps the window plus a sorted copy of it.  Each step removes the evicted
# value from the sorted copy and inserts the new one by shifting the slots
# in between: O(length) moves, no allocation after construction.

class SMM(Method):
    """Simple moving median.  NaN is not in the domain (asserted)."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "SMM")
        _check_finite(value, "SMM")
        self.half = length // 2
        self.half_m1 = self.half - (1 if length % 2 == 0 else 0)
        self.window: Window[float] = Window.create(length, float(value))
        self.slice: np.ndarray = np.full(length, float(value), dtype=float)

    def get_window(self) -> Window[float]:
        return self.window

    def get_last_value(self) -> float:
        return float((self.slice[self.half] + self.slice[self.half_m1]) * 0.5)

    def next(self, value: float) -> float:
        assert value == value, "SMM method cannot operate with NAN values"

        old_value = self.window.push(value)
        old_index = int(np.searchsorted(self.slice, old_value))
        index = int(np.searchsorted(self.slice, value))

        # the old slot disappears first, so later positions move one back
        if old_index < index:
            index -= 1
            self.slice[old_index:index] = self.slice[old_index + 1:index + 1]
        elif index < old_index:
            self.slice[index + 1:old_index + 1] = self.slice[index:old_index]

        self.slice[index] = value
        return self.get_last_value()


# ===========================================================================
# Conv  -- convolution with arbitrary weights
# ===========================================================================
# weights[0] applies to the oldest value, weights[-1] to the newest, so
# Conv(range(1, n + 1)) equals WMA(n).

class Conv(Method):
    """Weighted average with custom weights."""

    def __init__(self, weights: Sequence[float], value: float) -> None:
        weights_list: List[float] = [float(w) for w in weights]
        if not weights_list:
            raise WrongMethodParameters("Conv: weights must not be empty")
        weight_sum = sum(weights_list)
        if weight_sum == 0.0:
            raise WrongMethodParameters("Conv: weights must not sum to zero")
        self.weights = weights_list
        self.wsum_invert = 1.0 / weight_sum
        self.window: Window[float] = Window.create(len(weights_list), float(value))

    def next(self, value: float) -> float:
        self.window.push(value)
        total = 0.0
        for x, weight in zip(self.window.iter_rev(), self.weights):
            total += x * weight
        return total * self.wsum_invert


# ===========================================================================
# HMA  -- Hull Moving Average
# ===========================================================================
# hma = WMA(sqrt(n)) of (2 * WMA(n / 2) - WMA(n))

class HMA(Method):
    """Hull moving average.  Requires ``length >= 2``."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "HMA", minimum=2)
        self.wma1 = WMA(length // 2, value)
        self.wma2 = WMA(length, value)
        self.wma3 = WMA(int(math.sqrt(length)), value)

    def next(self, value: float) -> float:
        w1 = self.wma1.next(value)
        w2 = self.wma2.next(value)
        return self.wma3.next(2.0 * w1 - w2)


# ===========================================================================
# SWMA  -- Symmetrically Weighted Moving Average
# ===========================================================================
# Triangular weights 1, 2, .., peak, .., 2, 1 (length 5 -> 1 2 3 2 1,
# length 4 -> 1 2 2 1).  The window is split in two halves; the newer half
# carries rising weights, the older half falling ones.  Each half keeps a
# running sum so a step is O(1):
#   right: newest ``length // 2`` values
#   left : the ``(length + 1) // 2`` values before them

class SWMA(Method):
    """Symmetrically weighted moving average."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "SWMA")
        value = float(value)
        left_len = (length + 1) // 2
        right_len = length // 2
        weight_sum = left_len * (left_len + 1) // 2 + right_len * (right_len + 1) // 2

        self.left_len = float(left_len)
        self.right_len = float(right_len)
        self.invert_sum = 1.0 / weight_sum
        self.numerator = value * weight_sum
        self.left_total = -value * left_len
        self.right_total = value * right_len
        self.left_window: Window[float] = Window.create(left_len, value)
        self.right_window: Window[float] = Window.create(right_len, value)

    def next(self, value: float) -> float:
        if self.right_window.is_empty():
            return value

        right_prev = self.right_window.push(value)
        self.right_total += value - right_prev
        self.numerator += self.right_total - self.right_len * right_prev

        left_prev = self.left_window.push(right_prev)
        self.numerator += self.left_len * right_prev + self.left_total
        self.left_total += left_prev - right_prev

        return self.numerator * self.invert_sum


# ===========================================================================
# TRIMA  -- Triangular Moving Average: SMA of SMA
# ===========================================================================

class TRIMA(Method):
    """Triangular moving average."""

    def __init__(self, length: int, value: float) -> None:
        self.sma1 = SMA(length, value)
        self.sma2 = SMA(length, value)

    def next(self, value: float) -> float:
        return self.sma2.next(self.sma1.next(value))


# ===========================================================================
# LinReg  -- Linear Regression Moving Average
# ===========================================================================
# Least squares line over the window with x = 0 for the oldest value and
# x = n - 1 for the newest; the output is the line at x = n - 1.
#   s_x  = n(n-1)/2          s_x2 = (n-1)n(2n-1)/6     (constants)
#   s_xy -= s_y - oldest;  s_xy += (n-1) * x;  s_y += x - oldest
#   k = (n*s_xy - s_x*s_y) / (n*s_x2 - s_x^2),  b = (s_y - k*s_x) / n

class LinReg(Method):
    """Linear regression moving average.  Requires ``length >= 2``."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "LinReg", minimum=2)
        value = float(value)
        n = float(length)
        self.n = n
        self.s_x = n * (n - 1.0) * 0.5
        self.divider = 1.0 / (n * ((n - 1.0) * n * (2.0 * n - 1.0) / 6.0) - self.s_x * self.s_x)
        self.s_y = value * n
        self.s_xy = value * self.s_x
        self.window: Window[float] = Window.create(length, value)

    def next(self, value: float) -> float:
        prev_value = self.window.push(value)
        self.s_xy += (self.n - 1.0) * value - (self.s_y - prev_value)
        self.s_y += value - prev_value

        k = (self.n * self.s_xy - self.s_x * self.s_y) * self.divider
        b = (self.s_y - k * self.s_x) / self.n
        return b + k * (self.n - 1.0)


LinearRegression = LinReg


# ===========================================================================
# VWMA  -- Volume Weighted Moving Average
# ===========================================================================
# Input is a pair (value, volume).  vwma = sum(value*volume) / sum(volume).
# A window without volume yields NaN (0 / 0).

class VWMA(Method):
    """Volume weighted moving average over ``(value, volume)`` pairs."""

    def __init__(self, length: int, value: Tuple[float, float]) -> None:
        length = _check_length(length, "VWMA")
        price, volume = float(value[0]), float(value[1])
        self.total = price * volume * length
        self.vol_total = volume * length
        self.window: Window[Tuple[float, float]] = Window.create(length, (price, volume))

    def next(self, value: Tuple[float, float]) -> float:
        price, volume = float(value[0]), float(value[1])
        prev_price, prev_volume = self.window.push((price, volume))
        self.total += price * volume - prev_price * prev_volume
        self.vol_total += volume - prev_volume
        if self.vol_total == 0.0:
            return float("nan")
        return self.total / self.vol_total


# ===========================================================================
# Vidya  -- Variable Index Dynamic Average
# ===========================================================================
# f   = 2 / (length + 1)
# cmo = |(up - down) / (up + down)| over the last ``length`` changes
# out = x * f * cmo + last * (1 - f * cmo)

class Vidya(Method):
    """Chande's variable index dynamic average."""

    def __init__(self, length: int, value: float) -> None:
        length = _check_length(length, "Vidya")
        self.f = 2.0 / (1.0 + length)
        self.up_sum = 0.0
        self.down_sum = 0.0
        self.last_input = float(value)
        self.last_output = float(value)
        self.window: Window[float] = Window.create(length, 0.0)

    def next(self, value: float) -> float:
        change = value - self.last_input
        self.last_input = value

        prev_change = self.window.push(change)
        if prev_change > 0.0:
            self.up_sum -= prev_change
        elif prev_change < 0.0:
            self.down_sum += prev_change
        if change > 0.0:
            self.up_sum += change
        elif change < 0.0:
            self.down_sum -= change

        if self.up_sum == 0.0 and self.down_sum == 0.0:
            self.last_output = value
            return value

        cmo = abs((self.up_sum - self.down_sum) / (self.up_sum + self.down_sum))
        f_cmo = self.f * cmo
        self.last_output = value * f_cmo + (1.0 - f_cmo) * self.last_output
        return self.last_output
