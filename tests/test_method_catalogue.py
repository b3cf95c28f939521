# -*- coding: utf-8 -*-
"""Moving averages, deviations, bar methods and pivot signals checked
against straightforward numpy / pandas recomputations."""
from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from streaming_ta import (
    ADI,
    ATR,
    CCI,
    EMA,
    HMA,
    MA,
    SMA,
    SWMA,
    TR,
    TRIMA,
    TSI,
    VWMA,
    WMA,
    Action,
    Candle,
    HeikinAshi,
    HighestIndex,
    InvalidCandles,
    LinReg,
    LinearVolatility,
    LowestIndex,
    MeanAbsDev,
    MedianAbsDev,
    RegularMethods,
    ReverseHighSignal,
    ReverseLowSignal,
    ReverseSignal,
    Vidya,
    Volatility,
    WrongMethodParameters,
    candles_from_frame,
    method,
)


def seeded(data, length, seed):
    """Oldest-first window of ``[seed] * length + data`` at every step."""
    padded = [seed] * length + list(data)
    return [padded[i + 1:i + 1 + length] for i in range(len(data))]


# ---------------------------------------------------------------------------
# Moving averages
# ---------------------------------------------------------------------------

def test_hma_is_wma_composition(closes):
    seed = closes[0]
    w1, w2, w3 = WMA(4, seed), WMA(9, seed), WMA(3, seed)
    expected = [w3.next(2.0 * w1.next(x) - w2.next(x)) for x in closes]
    assert HMA(9, seed).over(closes) == pytest.approx(expected)


def test_hma_needs_two_values():
    with pytest.raises(WrongMethodParameters):
        HMA(1, 1.0)


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 8])
def test_swma_matches_triangular_weights(closes, length):
    weights = np.array(
        list(range(1, (length + 1) // 2 + 1)) + list(range(length // 2, 0, -1)), dtype=float
    )
    swma = SWMA(length, closes[0])
    for x, window in zip(closes, seeded(closes, length, closes[0])):
        assert swma.next(x) == pytest.approx(float(np.dot(window, weights) / weights.sum()))


def test_swma_weights_shape():
    # a single spike walks through the 1 2 3 2 1 profile
    swma = SWMA(5, 0.0)
    out = swma.over([9.0, 0.0, 0.0, 0.0, 0.0, 0.0])
    assert out == pytest.approx([1.0, 2.0, 3.0, 2.0, 1.0, 0.0])


def test_trima_is_sma_of_sma(closes):
    outer, inner = SMA(6, closes[0]), SMA(6, closes[0])
    expected = [outer.next(inner.next(x)) for x in closes]
    assert TRIMA(6, closes[0]).over(closes) == pytest.approx(expected)


@pytest.mark.parametrize("length", [2, 5, 12])
def test_lin_reg_matches_polyfit(closes, length):
    x_axis = np.arange(length, dtype=float)
    lin_reg = LinReg(length, closes[0])
    for x, window in zip(closes, seeded(closes, length, closes[0])):
        k, b = np.polyfit(x_axis, window, 1)
        assert lin_reg.next(x) == pytest.approx(k * (length - 1) + b, rel=1e-6, abs=1e-9)


def test_lin_reg_follows_a_line():
    line = [3.0 + 0.5 * i for i in range(20)]
    out = LinReg(4, line[0]).over(line)
    assert out[5:] == pytest.approx(line[5:])
    with pytest.raises(WrongMethodParameters):
        LinReg(1, 1.0)


def test_vwma_matches_weighted_mean(ohlcv):
    pairs = [(b.close, b.volume) for b in candles_from_frame(ohlcv)]
    vwma = VWMA(5, pairs[0])
    for pair, window in zip(pairs, seeded(pairs, 5, pairs[0])):
        prices = np.array([p for p, _ in window])
        volumes = np.array([v for _, v in window])
        assert vwma.next(pair) == pytest.approx(float((prices * volumes).sum() / volumes.sum()))


def test_vwma_without_volume_is_nan():
    vwma = VWMA(2, (1.0, 0.0))
    assert math.isnan(vwma.next((2.0, 0.0)))


def test_vidya_matches_recomputation(closes):
    length = 7
    f = 2.0 / (1 + length)
    changes = [0.0] * length
    last_input, last_output = closes[0], closes[0]
    vidya = Vidya(length, closes[0])
    for x in closes:
        changes.append(x - last_input)
        last_input = x
        recent = changes[-length:]
        up = sum(c for c in recent if c > 0.0)
        down = -sum(c for c in recent if c < 0.0)
        if up == 0.0 and down == 0.0:
            last_output = x
        else:
            cmo = abs((up - down) / (up + down))
            last_output = x * f * cmo + (1.0 - f * cmo) * last_output
        assert vidya.next(x) == pytest.approx(last_output, rel=1e-9, abs=1e-12)


def test_vidya_constant_input():
    vidya = Vidya(5, 2.0)
    assert vidya.over([2.0] * 10) == [2.0] * 10


# ---------------------------------------------------------------------------
# Deviations
# ---------------------------------------------------------------------------

def test_mean_abs_dev_and_cci(closes):
    length = 8
    mad, cci = MeanAbsDev(length, closes[0]), CCI(length, closes[0])
    for x, window in zip(closes, seeded(closes, length, closes[0])):
        w = np.array(window)
        expected_mad = float(np.abs(w - w.mean()).mean())
        assert mad.next(x) == pytest.approx(expected_mad, abs=1e-9)
        expected_cci = (x - w.mean()) / expected_mad if expected_mad > 0.0 else 0.0
        assert cci.next(x) == pytest.approx(expected_cci, rel=1e-6, abs=1e-9)


def test_cci_of_flat_series_is_zero():
    assert CCI(4, 1.0).over([1.0] * 6) == [0.0] * 6


def test_median_abs_dev(closes):
    length = 5
    mad = MedianAbsDev(length, closes[0])
    for x, window in zip(closes, seeded(closes, length, closes[0])):
        w = np.array(window)
        assert mad.next(x) == pytest.approx(float(np.abs(w - np.median(w)).mean()), abs=1e-12)


def test_median_abs_dev_parameters():
    with pytest.raises(WrongMethodParameters):
        MedianAbsDev(1, 1.0)
    with pytest.raises(InvalidCandles):
        MedianAbsDev(3, math.nan)


def test_linear_volatility(closes):
    length = 6
    diffs = [0.0] * length + [abs(b - a) for a, b in zip([closes[0]] + closes[:-1], closes)]
    vol = LinearVolatility(length, closes[0])
    for i, x in enumerate(closes):
        expected = sum(diffs[i + 1:i + 1 + length])
        assert vol.next(x) == pytest.approx(expected, abs=1e-9)
    assert Volatility is LinearVolatility


# ---------------------------------------------------------------------------
# Extremum index
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("length", [1, 3, 10])
def test_highest_lowest_index(closes, length):
    hi, lo = HighestIndex(length, closes[0]), LowestIndex(length, closes[0])
    for x, window in zip(closes, seeded(closes, length, closes[0])):
        newest_first = window[::-1]
        assert hi.next(x) == newest_first.index(max(newest_first))
        assert lo.next(x) == newest_first.index(min(newest_first))


def test_highest_index_prefers_newest_tie():
    hi = HighestIndex(4, 0.0)
    assert hi.over([5.0, 1.0, 5.0, 2.0]) == [0, 1, 0, 1]


def test_extremum_index_rejects_nan():
    with pytest.raises(InvalidCandles):
        HighestIndex(3, math.nan)
    lo = LowestIndex(3, 1.0)
    with pytest.raises(AssertionError):
        lo.next(math.nan)


# ---------------------------------------------------------------------------
# Bar methods
# ---------------------------------------------------------------------------

def test_adi_moving_and_running(ohlcv):
    bars = candles_from_frame(ohlcv)
    clvv = [b.clv() * b.volume for b in bars]
    running = ADI(0, bars[0]).over(bars)
    assert running == pytest.approx(list(np.cumsum(clvv)))
    moving = ADI(4, bars[0]).over(bars)
    expected = [sum(w) for w in seeded(clvv, 4, clvv[0])]
    assert moving == pytest.approx(expected)


def test_atr_is_sma_of_true_range(ohlcv):
    bars = candles_from_frame(ohlcv)
    tr = TR(None, bars[0]).over(bars)
    seed = bars[0].high - bars[0].low
    expected = [sum(w) / 5 for w in seeded(tr, 5, seed)]
    assert ATR(5, bars[0]).over(bars) == pytest.approx(expected)


def test_heikin_ashi(ohlcv):
    bars = candles_from_frame(ohlcv)
    ha = HeikinAshi(None, bars[0]).over(bars)
    prev_open, prev_close = bars[0].open, bars[0].close
    for bar, candle in zip(bars, ha):
        ha_open = 0.5 * (prev_open + prev_close)
        ha_close = 0.25 * (bar.open + bar.high + bar.low + bar.close)
        assert isinstance(candle, Candle)
        assert candle.open == pytest.approx(ha_open)
        assert candle.close == pytest.approx(ha_close)
        assert candle.high == pytest.approx(max(bar.high, ha_open, ha_close))
        assert candle.low == pytest.approx(min(bar.low, ha_open, ha_close))
        assert candle.volume == bar.volume
        prev_open, prev_close = ha_open, ha_close


# ---------------------------------------------------------------------------
# TSI
# ---------------------------------------------------------------------------

def test_tsi_matches_pandas_ewm(closes):
    short, long = 5, 13
    series = pd.Series(closes)
    momentum = series.diff().fillna(0.0)

    def double_smooth(values):
        padded = pd.concat([pd.Series([0.0]), values], ignore_index=True)
        smooth = padded.ewm(span=long, adjust=False).mean()
        return smooth.ewm(span=short, adjust=False).mean().iloc[1:].to_numpy()

    numerator = double_smooth(momentum)
    denominator = double_smooth(momentum.abs())
    expected = np.where(denominator > 0.0, numerator / np.where(denominator > 0.0, denominator, 1.0), 0.0)
    out = TSI((short, long), closes[0]).over(closes)
    np.testing.assert_allclose(out, expected, rtol=1e-9, atol=1e-12)
    assert all(abs(x) <= 1.0 + 1e-12 for x in out)


def test_tsi_parameters():
    with pytest.raises(WrongMethodParameters):
        TSI(5, 1.0)
    with pytest.raises(WrongMethodParameters):
        TSI((0, 13), 1.0)


# ---------------------------------------------------------------------------
# Pivot signals
# ---------------------------------------------------------------------------

def pivot_reference(data, left, right, seed, pick):
    """Signals recomputed from the full padded window at every step."""
    size = left + right + 1
    padded = [seed] * size + list(data)
    out = []
    for i in range(len(data)):
        window = padded[i + 1:i + 1 + size]
        target = pick(window)
        newest = size - 1 - window[::-1].index(target)
        out.append(i >= right and newest == size - 1 - right)
    return out


@pytest.mark.parametrize("left,right", [(1, 1), (2, 3), (5, 2)])
def test_reverse_signals_match_reference(closes, left, right):
    highs = ReverseHighSignal((left, right), closes[0]).over(closes)
    lows = ReverseLowSignal((left, right), closes[0]).over(closes)
    expected_highs = pivot_reference(closes, left, right, closes[0], max)
    expected_lows = pivot_reference(closes, left, right, closes[0], min)
    assert highs == [Action.from_bool(x) for x in expected_highs]
    assert lows == [Action.from_bool(x) for x in expected_lows]
    assert any(expected_highs) and any(expected_lows)

    combined = ReverseSignal((left, right), closes[0]).over(closes)
    for out, h, l in zip(combined, expected_highs, expected_lows):
        assert out == Action.from_bool(l) - Action.from_bool(h)


def test_reverse_signal_marks_peak_and_trough():
    data = [1.0, 2.0, 5.0, 2.0, 1.0, 0.0, 1.0, 2.0]
    out = ReverseSignal((2, 2), 1.0).over(data)
    assert out[4] == Action.SELL_ALL
    assert out[7] == Action.BUY_ALL
    assert out[5] == Action.NONE


def test_reverse_signal_parameters():
    for params in [(0, 2), (2, 0), 3, (1, 2, 3)]:
        with pytest.raises(WrongMethodParameters):
            ReverseSignal(params, 1.0)


# ---------------------------------------------------------------------------
# Moving average constructors
# ---------------------------------------------------------------------------

def test_ma_parse_and_init(closes):
    ma = MA.parse("ema-10")
    assert ma.ma_type() is RegularMethods.EMA
    assert ma.ma_period() == 10
    assert str(ma) == "ema-10"
    assert MA.parse(" HMA-9 ") == MA(RegularMethods.HMA, 9)
    assert ma.init(closes[0]).over(closes) == EMA(10, closes[0]).over(closes)
    assert MA.parse("lin_reg-4").init(1.0).name == "LinReg"


def test_ma_similarity():
    assert MA.parse("sma-3").is_similar_to(MA.parse("sma-20"))
    assert not MA.parse("sma-3").is_similar_to(MA.parse("wma-3"))


@pytest.mark.parametrize("text", ["ema", "ema-", "-10", "ema-x", "ema-1.5", "kama-10", "st_dev-5"])
def test_ma_parse_errors(text):
    with pytest.raises(WrongMethodParameters):
        MA.parse(text)


def test_new_names_are_registered():
    assert isinstance(method("linreg", 3, 1.0), LinReg)
    assert isinstance(method("hma", 4, 1.0), HMA)
    assert isinstance(method("volatility", 3, 1.0), LinearVolatility)
    assert RegularMethods.parse("MeanAbsDev") is RegularMethods.MEAN_ABS_DEV
    assert RegularMethods.VIDYA.is_moving_average()
    assert not RegularMethods.CCI.is_moving_average()
