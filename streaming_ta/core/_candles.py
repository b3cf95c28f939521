# -*- coding: utf-8 -*-
"""streaming_ta core – observations (OHLCV bars) and price sources.

The core never assumes a record layout: anything exposing ``open``,
``high``, ``low``, ``close`` and ``volume`` attributes is a bar.  Derived
prices live on the :class:`OHLCV` mixin and as module functions for
objects that do not inherit from it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

from ._errors import SourceParse


class Source(Enum):
    """Common parts of a bar."""
    CLOSE = "close"
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    HL2 = "hl2"
    TP = "tp"
    VOLUME = "volume"
    VOLUMED_PRICE = "volumed_price"

    @classmethod
    def parse(cls, text: str) -> "Source":
        """Case-insensitive parsing; raises :class:`SourceParse`."""
        if isinstance(text, Source):
            return text
        key = str(text).strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise SourceParse(key) from None

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Derived prices (duck typed)
# ---------------------------------------------------------------------------

def tp(bar: Any) -> float:
    """Typical price: (high + low + close) / 3."""
    return (bar.high + bar.low + bar.close) / 3.0


def hl2(bar: Any) -> float:
    """Midpoint of high and low."""
    return (bar.high + bar.low) * 0.5


def ohlc4(bar: Any) -> float:
    return (bar.open + bar.high + bar.low + bar.close) * 0.25


def clv(bar: Any) -> float:
    """Close location value: ((close - low) - (high - close)) / (high - low)."""
    if bar.high == bar.low:
        return 0.0
    return (2.0 * bar.close - bar.low - bar.high) / (bar.high - bar.low)


def tr_close(bar: Any, prev_close: float) -> float:
    """True range against the previous close."""
    return max(bar.high, prev_close) - min(bar.low, prev_close)


def tr(bar: Any, prev_bar: Any) -> float:
    """True range over two consecutive bars."""
    return tr_close(bar, prev_bar.close)


def volumed_price(bar: Any) -> float:
    return tp(bar) * bar.volume


def validate(bar: Any) -> bool:
    """True when the bar is consistent: positive finite prices, ``low``
    not above any other price, non-negative finite volume."""
    o, h, l, c = bar.open, bar.high, bar.low, bar.close
    if c > h or c < l or h < l:
        return False
    if not all(math.isfinite(x) and x > 0.0 for x in (o, h, l, c)):
        return False
    volume = bar.volume
    return math.isfinite(volume) and volume >= 0.0


_SOURCE_GETTERS = {
    Source.CLOSE: lambda bar: bar.close,
    Source.OPEN: lambda bar: bar.open,
    Source.HIGH: lambda bar: bar.high,
    Source.LOW: lambda bar: bar.low,
    Source.HL2: hl2,
    Source.TP: tp,
    Source.VOLUME: lambda bar: bar.volume,
    Source.VOLUMED_PRICE: volumed_price,
}


def source(bar: Any, src: Source) -> float:
    """Value of the *src* part of the bar."""
    return _SOURCE_GETTERS[src](bar)


# ---------------------------------------------------------------------------
# Bar types
# ---------------------------------------------------------------------------

class OHLCV:
    """Mixin for bar types; subclasses provide the five price attributes."""

    __slots__ = ()

    open: float
    high: float
    low: float
    close: float
    volume: float

    def tp(self) -> float:
        return tp(self)

    def hl2(self) -> float:
        return hl2(self)

    def ohlc4(self) -> float:
        return ohlc4(self)

    def clv(self) -> float:
        return clv(self)

    def tr(self, prev_bar: Any) -> float:
        return tr(self, prev_bar)

    def tr_close(self, prev_close: float) -> float:
        return tr_close(self, prev_close)

    def volumed_price(self) -> float:
        return volumed_price(self)

    def validate(self) -> bool:
        return validate(self)

    def source(self, src: Source) -> float:
        return source(self, src)


@dataclass(frozen=True)
class Candle(OHLCV):
    """Plain OHLCV bar."""
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0

    @classmethod
    def from_tuple(cls, row: Sequence[float]) -> "Candle":
        """``(open, high, low, close)`` or ``(open, high, low, close, volume)``."""
        if len(row) not in (4, 5):
            raise ValueError(f"Expected 4 or 5 values, got {len(row)}")
        return cls(*(float(x) for x in row))

    @classmethod
    def from_bar(cls, bar: Mapping[str, Any]) -> "Candle":
        """Build from a ``{"open": …, "high": …}`` mapping; missing volume is 0."""
        return cls(
            open=float(bar["open"]),
            high=float(bar["high"]),
            low=float(bar["low"]),
            close=float(bar["close"]),
            volume=float(bar.get("volume", 0.0)),
        )


Candlestick = Candle
