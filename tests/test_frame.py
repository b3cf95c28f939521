# -*- coding: utf-8 -*-
from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from streaming_ta import (
    SMA,
    Example,
    candles_from_frame,
    indicator_config,
    indicator_output_names,
    indicator_over_frame,
    method_over_series,
    resolve_output_names,
)


def test_candles_from_frame(ohlcv):
    bars = candles_from_frame(ohlcv)
    assert len(bars) == len(ohlcv)
    assert bars[0].close == ohlcv["close"].iloc[0]
    assert bars[-1].volume == ohlcv["volume"].iloc[-1]


def test_candles_from_frame_without_volume(ohlcv):
    bars = candles_from_frame(ohlcv.drop(columns=["volume"]))
    assert all(b.volume == 0.0 for b in bars)


def test_candles_from_frame_missing_columns(ohlcv):
    with pytest.raises(KeyError):
        candles_from_frame(ohlcv.drop(columns=["high"]))


def test_candles_from_frame_skips_nan_rows(ohlcv):
    df = ohlcv.copy()
    df.iloc[3, df.columns.get_loc("close")] = np.nan
    with pytest.warns(UserWarning):
        bars = candles_from_frame(df)
    assert len(bars) == len(df) - 1


def test_method_over_series_matches_rolling_mean(ohlcv):
    close = ohlcv["close"]
    out = method_over_series(SMA(5, close.iloc[0]), close)
    assert out.index.equals(close.index)
    assert out.name == "SMA"
    expected = close.rolling(5).mean()
    np.testing.assert_allclose(out.iloc[4:].to_numpy(), expected.iloc[4:].to_numpy())


def test_output_names():
    assert indicator_output_names("Example", (1, 2)) == ["EXAMPLE_v0", "EXAMPLE_s0", "EXAMPLE_s1"]
    names, error = resolve_output_names(["A", "B"], {"prefix": "x", "suffix": "y"})
    assert names == ["x_A_y", "x_B_y"] and error is None
    names, error = resolve_output_names(["A", "B"], {"col_names": ("z",)})
    assert names is None and error


def test_indicator_over_frame(ohlcv):
    price = float(ohlcv["close"].median())
    out = indicator_over_frame(Example(price=price, period=0), ohlcv)
    assert list(out.columns) == ["EXAMPLE_v0", "EXAMPLE_s0", "EXAMPLE_s1"]
    assert out.index.equals(ohlcv.index)
    np.testing.assert_allclose(out["EXAMPLE_v0"].to_numpy(), ohlcv["close"].to_numpy())
    assert out["EXAMPLE_s1"].eq(128 / 255).all()
    signals = out["EXAMPLE_s0"].dropna()
    assert set(signals.unique()) <= {1.0, -1.0}
    assert len(signals) > 0


def test_indicator_over_frame_dyn_and_prefix(ohlcv):
    price = float(ohlcv["close"].median())
    static = indicator_over_frame(Example(price=price), ohlcv)
    dyn = indicator_over_frame(indicator_config("example", price=price), ohlcv, prefix="ex")
    assert list(dyn.columns) == ["ex_EXAMPLE_v0", "ex_EXAMPLE_s0", "ex_EXAMPLE_s1"]
    pd.testing.assert_frame_equal(static, dyn.set_axis(static.columns, axis=1))


def test_indicator_over_frame_drops_nan_rows(ohlcv):
    df = ohlcv.copy()
    df.iloc[0, df.columns.get_loc("open")] = np.nan
    out = indicator_over_frame(Example(price=100.0), df)
    assert len(out) == len(df) - 1
    assert out.index[0] == df.index[1]


def test_indicator_over_frame_errors(ohlcv):
    with pytest.raises(TypeError):
        indicator_over_frame(SMA(3, 1.0), ohlcv)
    with pytest.raises(ValueError):
        indicator_over_frame(Example(), ohlcv, col_names=("a",))
