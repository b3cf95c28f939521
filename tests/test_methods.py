# -*- coding: utf-8 -*-
from __future__ import annotations

import math

import numpy as np
import pytest

from streaming_ta import (
    DEMA, DMA, EMA, MMA, RMA, SMA, SMM, TEMA, TMA, TR, WMA, WSMA,
    Action,
    Candle,
    Conv,
    Cross,
    CrossAbove,
    CrossUnder,
    Derivative,
    Highest,
    HighestLowestDelta,
    Integral,
    InvalidCandles,
    Lowest,
    Momentum,
    Past,
    RateOfChange,
    RegularMethods,
    StDev,
    WrongMethodParameters,
    method,
    regular_method_names,
)


MOVING_AVERAGES = [SMA, WMA, EMA, DMA, TMA, DEMA, TEMA, RMA, WSMA, SMM]


def seeded(data, length, seed):
    """Last ``length`` values of ``[seed] * length + data`` at every step."""
    padded = [seed] * length + list(data)
    return [padded[i + 1:i + 1 + length] for i in range(len(data))]


# ---------------------------------------------------------------------------
# Moving averages
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("cls", MOVING_AVERAGES)
def test_constant_input_is_stable(cls):
    ma = cls(7, 3.25)
    for _ in range(30):
        assert ma.next(3.25) == pytest.approx(3.25)


@pytest.mark.parametrize("cls", MOVING_AVERAGES)
def test_length_one_is_identity(cls, closes):
    ma = cls(1, closes[0])
    for x in closes[:50]:
        assert ma.next(x) == pytest.approx(x)


@pytest.mark.parametrize("cls", MOVING_AVERAGES + [StDev, Highest, Lowest, Past, Momentum])
def test_zero_length_is_rejected(cls):
    with pytest.raises(WrongMethodParameters):
        cls(0, 1.0)


def test_sma_matches_brute_force(closes):
    ma = SMA(10, closes[0])
    out = ma.over(closes)
    expected = [sum(w) / 10 for w in seeded(closes, 10, closes[0])]
    assert out == pytest.approx(expected)


def test_sma_seeded_end_to_end():
    assert SMA(2, 1.0).over([1.0, 2.0, 3.0, 4.0]) == [1.0, 1.5, 2.5, 3.5]


def test_wma_matches_brute_force(closes):
    length = 6
    weights = np.arange(1, length + 1, dtype=float)
    out = WMA(length, closes[0]).over(closes)
    expected = [float(np.dot(w, weights) / weights.sum()) for w in seeded(closes, length, closes[0])]
    assert out == pytest.approx(expected)


def test_conv_with_linear_weights_is_wma(closes):
    conv = Conv([1.0, 2.0, 3.0, 4.0, 5.0], closes[0]).over(closes)
    wma = WMA(5, closes[0]).over(closes)
    assert conv == pytest.approx(wma)


def test_conv_rejects_bad_weights():
    with pytest.raises(WrongMethodParameters):
        Conv([], 1.0)
    with pytest.raises(WrongMethodParameters):
        Conv([1.0, -1.0], 1.0)


def test_ema_first_step():
    ema = EMA(3, 1.0)
    assert ema.next(3.0) == pytest.approx(2.0)
    assert ema.next(2.0) == pytest.approx(2.0)


def test_rma_aliases():
    assert MMA is RMA
    assert RMA(4, 0.0).next(4.0) == pytest.approx(1.0)


def test_wsma_uses_wilder_alpha():
    assert WSMA(3, 0.0).next(1.0) == pytest.approx(1.0 / 3.0)


def test_dema_tema_follow_composition(closes):
    e1, e2, e3 = EMA(5, closes[0]), EMA(5, closes[0]), EMA(5, closes[0])
    dema, tema, dma, tma = DEMA(5, closes[0]), TEMA(5, closes[0]), DMA(5, closes[0]), TMA(5, closes[0])
    for x in closes:
        a = e1.next(x)
        b = e2.next(a)
        c = e3.next(b)
        assert dma.next(x) == pytest.approx(b)
        assert tma.next(x) == pytest.approx(c)
        assert dema.next(x) == pytest.approx(2 * a - b)
        assert tema.next(x) == pytest.approx(3 * (a - b) + c)


@pytest.mark.parametrize("length", [1, 2, 5, 8])
def test_smm_matches_median(closes, length):
    smm = SMM(length, closes[0])
    for x, window in zip(closes, seeded(closes, length, closes[0])):
        assert smm.next(x) == pytest.approx(float(np.median(window)))
    assert len(smm.get_window()) == length


def test_smm_with_repeated_values():
    data = [1.0, 3.0, 3.0, 2.0, 3.0, 1.0, 1.0, 5.0, 3.0]
    smm = SMM(4, 3.0)
    for x, window in zip(data, seeded(data, 4, 3.0)):
        assert smm.next(x) == float(np.median(window))


def test_smm_rejects_nan():
    with pytest.raises(InvalidCandles):
        SMM(3, math.nan)
    smm = SMM(3, 1.0)
    with pytest.raises(AssertionError):
        smm.next(math.nan)


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------

def test_st_dev_matches_numpy(closes):
    length = 9
    std = StDev(length, closes[0])
    for x, window in zip(closes, seeded(closes, length, closes[0])):
        assert std.next(x) == pytest.approx(float(np.std(window, ddof=1)), abs=1e-6)


def test_st_dev_needs_two_values():
    with pytest.raises(WrongMethodParameters):
        StDev(1, 1.0)
    assert StDev(2, 5.0).next(5.0) == 0.0


def test_highest_lowest(closes):
    length = 7
    hi, lo, delta = Highest(length, closes[0]), Lowest(length, closes[0]), HighestLowestDelta(length, closes[0])
    for x, window in zip(closes, seeded(closes, length, closes[0])):
        assert hi.next(x) == max(window)
        assert lo.next(x) == min(window)
        assert delta.next(x) == pytest.approx(max(window) - min(window))


def test_highest_rejects_non_finite_seed():
    with pytest.raises(InvalidCandles):
        Highest(3, math.nan)
    with pytest.raises(InvalidCandles):
        Lowest(3, math.inf)
    with pytest.raises(InvalidCandles):
        HighestLowestDelta(3, math.nan)


@pytest.mark.parametrize("cls", [Highest, Lowest, HighestLowestDelta])
def test_window_extremes_reject_nan_input(cls):
    m = cls(3, 1.0)
    with pytest.raises(AssertionError):
        m.next(math.nan)


# ---------------------------------------------------------------------------
# Differences
# ---------------------------------------------------------------------------

def test_past_returns_value_from_length_ago():
    past = Past(2, 0)
    assert [past.next(x) for x in (1, 2, 3, 4)] == [0, 0, 1, 2]


def test_past_works_on_bars():
    first = Candle(1.0, 2.0, 0.5, 1.5)
    second = Candle(2.0, 3.0, 1.5, 2.5)
    past = Past(1, first)
    assert past.next(second) is first


def test_momentum_and_derivative():
    mom = Momentum(2, 1.0)
    der = Derivative(2, 1.0)
    data = [2.0, 4.0, 7.0]
    assert mom.over(data) == [1.0, 3.0, 5.0]
    assert der.over(data) == [0.5, 1.5, 2.5]


def test_rate_of_change():
    roc = RateOfChange(1, 2.0)
    assert roc.next(3.0) == pytest.approx(0.5)
    assert roc.next(1.5) == pytest.approx(-0.5)
    zero = RateOfChange(1, 0.0)
    assert zero.next(1.0) == math.inf
    zero = RateOfChange(1, 0.0)
    assert zero.next(-1.0) == -math.inf
    zero = RateOfChange(1, 0.0)
    assert math.isnan(zero.next(0.0))


def test_integral_moving_sum():
    integral = Integral(3, 1.0)
    assert integral.over([2.0, 3.0, 4.0, 5.0]) == [4.0, 6.0, 9.0, 12.0]


def test_integral_running_total():
    integral = Integral()
    assert integral.over([1.0, 2.0, 3.0]) == [1.0, 3.0, 6.0]
    assert integral.window.is_empty()


# ---------------------------------------------------------------------------
# Crosses
# ---------------------------------------------------------------------------

def test_cross_above_and_under():
    above = CrossAbove(None, (1.0, 2.0))
    under = CrossUnder(None, (1.0, 2.0))
    pairs = [(1.5, 2.0), (2.0, 2.0), (2.5, 2.0), (1.9, 2.0)]
    assert [above.next(p) for p in pairs] == [Action.NONE, Action.BUY_ALL, Action.NONE, Action.NONE]
    assert [under.next(p) for p in pairs] == [Action.NONE, Action.NONE, Action.NONE, Action.BUY_ALL]


def test_cross_combines_directions():
    cross = Cross(None, (0.0, 1.0))
    out = cross.over([(2.0, 1.0), (3.0, 1.0), (0.0, 1.0), (0.5, 1.0), (1.0, 1.0)])
    assert out == [Action.BUY_ALL, Action.NONE, Action.SELL_ALL, Action.NONE, Action.BUY_ALL]


def test_cross_is_difference_of_bool_actions():
    pairs = [(2.0, 1.0), (0.0, 1.0), (0.0, 1.0), (1.0, 1.0)]
    cross = Cross(None, (0.0, 1.0))
    above = CrossAbove(None, (0.0, 1.0))
    under = CrossUnder(None, (0.0, 1.0))
    out = []
    for pair in pairs:
        expected = Action.from_bool(above.binary(*pair)) - Action.from_bool(under.binary(*pair))
        assert cross.next(pair) == expected
        out.append(expected)
    assert out == [Action.BUY_ALL, Action.SELL_ALL, Action.NONE, Action.BUY_ALL]


# ---------------------------------------------------------------------------
# Bars
# ---------------------------------------------------------------------------

def test_true_range_method():
    first = Candle(open=1.0, high=2.0, low=0.5, close=1.0)
    bars = [Candle(3.0, 4.0, 3.0, 3.5), Candle(3.5, 3.6, 3.0, 3.2)]
    assert TR(None, first).over(bars) == pytest.approx([3.0, 0.6])


def test_true_range_needs_a_first_bar():
    with pytest.raises(TypeError):
        TR()
    with pytest.raises(TypeError):
        TR(None)


# ---------------------------------------------------------------------------
# Runtime selection by name
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", regular_method_names())
def test_every_regular_method_builds_by_name(name, closes):
    m = method(name, 3, closes[0])
    out = m.over(closes[:20])
    assert len(out) == 20
    assert all(math.isfinite(x) for x in out)


def test_method_aliases():
    assert RegularMethods.parse("ROC") is RegularMethods.RATE_OF_CHANGE
    assert RegularMethods.parse("smma") is RegularMethods.RMA
    assert RegularMethods.parse(" StDev ") is RegularMethods.ST_DEV
    assert isinstance(method("mma", 3, 1.0), RMA)
    with pytest.raises(WrongMethodParameters):
        method("kama", 3, 1.0)
