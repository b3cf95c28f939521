# -*- coding: utf-8 -*-
"""streaming_ta – incremental time-series analytics.

Flat structure: ``streaming_ta.SMA`` or ``streaming_ta.methods.SMA``.
"""
from streaming_ta.core import *
from streaming_ta.core import __all__ as core_all
from streaming_ta.methods import *
from streaming_ta.methods import __all__ as methods_all
from streaming_ta.indicators import *
from streaming_ta.indicators import __all__ as indicators_all
from streaming_ta.helpers import RandomCandles, WithHistory, WithLastValue, make_ohlcv, sign, signi

version = "0.1.0"

__all__ = ["version", "RandomCandles", "WithHistory", "WithLastValue", "make_ohlcv", "sign", "signi"]
__all__ += core_all + methods_all + indicators_all
