# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List

import pytest

from streaming_ta import Candle, RandomCandles, make_ohlcv


@pytest.fixture
def candles() -> List[Candle]:
    return RandomCandles().take(300)


@pytest.fixture
def closes(candles) -> List[float]:
    return [c.close for c in candles]


@pytest.fixture
def ohlcv():
    return make_ohlcv(200, seed=11)
