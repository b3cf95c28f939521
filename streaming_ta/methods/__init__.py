# -*- coding: utf-8 -*-
"""streaming_ta.methods – concrete incremental transforms built on the core."""
from __future__ import annotations

from ._overlap import (
    SMA, WMA, EMA, DMA, DEMA, TMA, TEMA, RMA, MMA, SMMA, WSMA, SMM, Conv,
    HMA, SWMA, TRIMA, LinReg, LinearRegression, VWMA, Vidya,
)
from ._statistics import (
    StDev,
    Highest,
    Lowest,
    HighestLowestDelta,
    HighestIndex,
    LowestIndex,
    MeanAbsDev,
    MedianAbsDev,
    CCI,
    LinearVolatility,
    Volatility,
)
from ._momentum import (
    Past,
    Move,
    Momentum,
    Change,
    MTM,
    RateOfChange,
    ROC,
    Derivative,
    Differential,
    Integral,
    Sum,
    TSI,
    TrueStrengthIndex,
)
from ._signals import (
    Cross,
    CrossAbove,
    CrossUnder,
    ReverseSignal,
    ReverseHighSignal,
    ReverseLowSignal,
    PivotSignal,
    PivotHighSignal,
    PivotLowSignal,
)
from ._volatility import TR, AverageTrueRange, ATR
from ._volume import ADI, AD
from ._candle import HeikinAshi
from ._registry import (
    MA,
    MOVING_AVERAGES,
    METHOD_REGISTRY,
    RegularMethods,
    method,
    regular_method_names,
)

__all__ = [
    "SMA", "WMA", "EMA", "DMA", "DEMA", "TMA", "TEMA", "RMA", "MMA", "SMMA",
    "WSMA", "SMM", "Conv", "HMA", "SWMA", "TRIMA", "LinReg", "LinearRegression",
    "VWMA", "Vidya",
    "StDev", "Highest", "Lowest", "HighestLowestDelta", "HighestIndex",
    "LowestIndex", "MeanAbsDev", "MedianAbsDev", "CCI", "LinearVolatility",
    "Volatility",
    "Past", "Move", "Momentum", "Change", "MTM", "RateOfChange", "ROC",
    "Derivative", "Differential", "Integral", "Sum", "TSI", "TrueStrengthIndex",
    "Cross", "CrossAbove", "CrossUnder", "ReverseSignal", "ReverseHighSignal",
    "ReverseLowSignal", "PivotSignal", "PivotHighSignal", "PivotLowSignal",
    "TR", "AverageTrueRange", "ATR",
    "ADI", "AD",
    "HeikinAshi",
    "MA", "MOVING_AVERAGES", "METHOD_REGISTRY", "RegularMethods", "method",
    "regular_method_names",
]
