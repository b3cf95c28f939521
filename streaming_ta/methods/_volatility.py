# -*- coding: utf-8 -*-
"""streaming_ta methods – bar based volatility.

Input is any bar exposing ``high``, ``low`` and ``close``; the bar passed
to the constructor supplies the previous close.
"""
from __future__ import annotations

from typing import Any

from ..core import Method, tr_close
from ._overlap import SMA


class TR(Method):
    """True range: max(high, prev_close) - min(low, prev_close)."""

    def __init__(self, params: Any, value: Any) -> None:
        self.prev_close = float(value.close)

    def next(self, value: Any) -> float:
        result = tr_close(value, self.prev_close)
        self.prev_close = float(value.close)
        return result


# ===========================================================================
# ATR  -- Average True Range
# ===========================================================================
# atr = SMA(length) of TR.  The first bar has no previous close, so the
# average is seeded with its high - low.

class AverageTrueRange(Method):
    """Simple moving average of the true range."""

    def __init__(self, length: int, value: Any) -> None:
        self.tr = TR(None, value)
        self.ma = SMA(length, float(value.high - value.low))

    def next(self, value: Any) -> float:
        return self.ma.next(self.tr.next(value))


ATR = AverageTrueRange
