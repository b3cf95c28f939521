# -*- coding: utf-8 -*-
"""streaming_ta.core – window, method contract, signals and indicator traits.

The ``methods`` and ``indicators`` packages are consumers of this API.
"""
from __future__ import annotations

from ._base import (
    NAN,
    PeriodType,
    ValueType,
    _is_nan,
    _as_bool,
)
from ._errors import (
    StreamingTAError,
    SourceParse,
    ParameterParse,
    WrongMethodParameters,
    WrongConfig,
    InvalidCandles,
)
from ._window import Window, UncheckedWindow, WindowIterator, ReversedWindowIterator
from ._method import Method, Sequence, apply
from ._moving_average import MovingAverageConstructor
from ._action import Action, BOUND
from ._candles import OHLCV, Candle, Candlestick, Source, tp, hl2, ohlc4, clv, tr, tr_close, source
from ._indicator import (
    IndicatorResult,
    IndicatorConfig,
    IndicatorInstance,
    IndicatorConfigDyn,
    IndicatorInstanceDyn,
    DynConfig,
    DynInstance,
    INDICATOR_REGISTRY,
    as_dyn,
    register_indicator,
    indicator_config,
    supported_indicators,
)
from ._frame import (
    OHLCV_COLUMNS,
    candles_from_frame,
    indicator_output_names,
    indicator_over_frame,
    method_over_series,
    resolve_output_names,
)

__all__ = [
    "NAN",
    "PeriodType",
    "ValueType",
    "StreamingTAError",
    "SourceParse",
    "ParameterParse",
    "WrongMethodParameters",
    "WrongConfig",
    "InvalidCandles",
    "Window",
    "UncheckedWindow",
    "WindowIterator",
    "ReversedWindowIterator",
    "Method",
    "Sequence",
    "apply",
    "MovingAverageConstructor",
    "Action",
    "BOUND",
    "OHLCV",
    "Candle",
    "Candlestick",
    "Source",
    "tp",
    "hl2",
    "ohlc4",
    "clv",
    "tr",
    "tr_close",
    "source",
    "IndicatorResult",
    "IndicatorConfig",
    "IndicatorInstance",
    "IndicatorConfigDyn",
    "IndicatorInstanceDyn",
    "DynConfig",
    "DynInstance",
    "INDICATOR_REGISTRY",
    "as_dyn",
    "register_indicator",
    "indicator_config",
    "supported_indicators",
    "OHLCV_COLUMNS",
    "candles_from_frame",
    "indicator_output_names",
    "indicator_over_frame",
    "method_over_series",
    "resolve_output_names",
]
