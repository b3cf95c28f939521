# -*- coding: utf-8 -*-
"""streaming_ta methods – candle transforms."""
from __future__ import annotations

from typing import Any

from ..core import Candle, Method, ohlc4


# ===========================================================================
# HeikinAshi
# ===========================================================================
#   ha_close = (open + high + low + close) / 4
#   ha_open  = (prev_ha_open + prev_ha_close) / 2
#   ha_high  = max(high, ha_open, ha_close)
#   ha_low   = min(low,  ha_open, ha_close)
# The bar passed to the constructor acts as the previous Heikin Ashi
# candle for the first step.

class HeikinAshi(Method):
    """Heikin Ashi candles; volume is passed through."""

    def __init__(self, params: Any, value: Any) -> None:
        self.prev_open = float(value.open)
        self.prev_close = float(value.close)

    def next(self, value: Any) -> Candle:
        ha_open = (self.prev_open + self.prev_close) * 0.5
        ha_close = ohlc4(value)
        candle = Candle(
            open=ha_open,
            high=max(value.high, ha_open, ha_close),
            low=min(value.low, ha_open, ha_close),
            close=ha_close,
            volume=value.volume,
        )
        self.prev_open = ha_open
        self.prev_close = ha_close
        return candle
