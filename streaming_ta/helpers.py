# -*- coding: utf-8 -*-
"""streaming_ta helpers – sign functions, method wrappers and synthetic data
generators."""
from __future__ import annotations

import math
from typing import Any, Iterator, List, Optional

import numpy as np
import pandas as pd

from .core import Candle, Method


def sign(value: float) -> float:
    """1.0, -1.0 or 0.0 (NaN gives 0.0)."""
    return float((value > 0.0) - (value < 0.0))


def signi(value: float) -> int:
    return int(value > 0.0) - int(value < 0.0)


# ---------------------------------------------------------------------------
# Method wrappers
# ---------------------------------------------------------------------------

class WithHistory(Method):
    """Wraps a method and records every output it produces.

    ``get(0)`` is the latest output, ``get(1)`` the one before; indexes past
    the recorded history give None.  Iteration runs oldest to newest.
    """

    def __init__(self, method: Method) -> None:
        self.method = method
        self.history: List[Any] = []

    def next(self, value: Any) -> Any:
        output = self.method.next(value)
        self.history.append(output)
        return output

    @property
    def name(self) -> str:
        return self.method.name

    def get(self, index: int) -> Optional[Any]:
        if 0 <= index < len(self.history):
            return self.history[-1 - index]
        return None

    def last(self) -> Optional[Any]:
        return self.get(0)

    def __len__(self) -> int:
        return len(self.history)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.history)


class WithLastValue(Method):
    """Wraps a method and keeps its last output for ``peek``.

    The wrapped method is fed *value* once on construction so ``peek`` is
    defined from the start.
    """

    def __init__(self, method: Method, value: Any) -> None:
        self.method = method
        self.last_value = method.next(value)

    def next(self, value: Any) -> Any:
        self.last_value = self.method.next(value)
        return self.last_value

    @property
    def name(self) -> str:
        return self.method.name

    def peek(self) -> Any:
        return self.last_value


class RandomCandles:
    """Endless, deterministic stream of valid-looking candles.

    Prices wave around 1.0 with a trigonometric pattern; the same position
    always yields the same candle.
    """

    DEFAULT_PRICE = 1.0
    DEFAULT_VOLUME = 10.0

    def __init__(self) -> None:
        self.position = 0

    def __iter__(self) -> Iterator[Candle]:
        return self

    def __next__(self) -> Candle:
        candle = self._candle_at(self.position)
        self.position = (self.position - 1) & 0xFFFF
        return candle

    def first(self) -> Candle:
        return self._candle_at(0)

    def take(self, n: int) -> List[Candle]:
        return [next(self) for _ in range(n)]

    @classmethod
    def _candle_at(cls, position: int) -> Candle:
        prev_position = float((position - 1) & 0xFFFF)
        position_f = float(position)

        close = cls.DEFAULT_PRICE + math.sin(position_f) / 2.0
        open_ = cls.DEFAULT_PRICE + math.sin(prev_position) / 2.0
        high = max(close, open_) + abs(math.tan(position_f * 1.4))
        low = min(close, open_) - abs(math.cos(position_f * 0.8)) / 3.0
        volume = cls.DEFAULT_VOLUME * math.sin(position_f / 2.0) + cls.DEFAULT_VOLUME / 2.0
        return Candle(open=open_, high=high, low=low, close=close, volume=volume)


def make_ohlcv(rows: int, seed: int = 7) -> pd.DataFrame:
    """Random-walk OHLCV frame on a 1 minute index."""
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    volume = rng.integers(100, 1000, rows).astype(float)
    return pd.DataFrame(
        {
            "open": open_,
            "high": high,
            "low": low,
            "close": close,
            "volume": volume,
        },
        index=idx,
    )
