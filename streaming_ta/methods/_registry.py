# -*- coding: utf-8 -*-
"""streaming_ta methods – runtime selection of regular methods by name.

A *regular method* takes ``(length, value)``, a float input and returns a
float.  ``method("ema", 10, first_close)`` builds one without the caller
knowing its class, which is how indicators pick their moving average from a
config string.  Moving averages can also be described as ``"ema-10"`` and
parsed into an :class:`MA` constructor.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Type, Union

from ..core import Method, MovingAverageConstructor, WrongMethodParameters
from ._momentum import Derivative, Integral, Momentum, Past, RateOfChange
from ._overlap import (
    DEMA, DMA, EMA, HMA, RMA, SMA, SMM, SWMA, TEMA, TMA, TRIMA, WMA, WSMA, LinReg, Vidya,
)
from ._statistics import (
    CCI,
    Highest,
    HighestLowestDelta,
    LinearVolatility,
    Lowest,
    MeanAbsDev,
    MedianAbsDev,
    StDev,
)


class RegularMethods(Enum):
    """Names of the regular methods."""
    SMA = "sma"
    WMA = "wma"
    HMA = "hma"
    RMA = "rma"
    EMA = "ema"
    DMA = "dma"
    DEMA = "dema"
    TMA = "tma"
    TEMA = "tema"
    WSMA = "wsma"
    SMM = "smm"
    SWMA = "swma"
    TRIMA = "trima"
    LIN_REG = "lin_reg"
    VIDYA = "vidya"
    PAST = "past"
    DERIVATIVE = "derivative"
    INTEGRAL = "integral"
    ST_DEV = "st_dev"
    MOMENTUM = "momentum"
    RATE_OF_CHANGE = "rate_of_change"
    HIGHEST = "highest"
    LOWEST = "lowest"
    HIGHEST_LOWEST_DELTA = "highest_lowest_delta"
    MEAN_ABS_DEV = "mean_abs_dev"
    MEDIAN_ABS_DEV = "median_abs_dev"
    CCI = "cci"
    VOLATILITY = "volatility"

    @classmethod
    def parse(cls, text: Union[str, "RegularMethods"]) -> "RegularMethods":
        """Case-insensitive parsing with aliases; raises WrongMethodParameters."""
        if isinstance(text, RegularMethods):
            return text
        key = str(text).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise WrongMethodParameters(f"Unknown regular method name {text}") from None

    def is_moving_average(self) -> bool:
        return self in MOVING_AVERAGES


_ALIASES: Dict[str, str] = {
    "move": "past",
    "stdev": "st_dev",
    "change": "momentum",
    "mtm": "momentum",
    "rateofchange": "rate_of_change",
    "roc": "rate_of_change",
    "mma": "rma",
    "smma": "rma",
    "sum": "integral",
    "linreg": "lin_reg",
    "meanabsdev": "mean_abs_dev",
    "medianabsdev": "median_abs_dev",
    "linear_volatility": "volatility",
}


MOVING_AVERAGES: FrozenSet[RegularMethods] = frozenset({
    RegularMethods.SMA,
    RegularMethods.WMA,
    RegularMethods.HMA,
    RegularMethods.RMA,
    RegularMethods.EMA,
    RegularMethods.DMA,
    RegularMethods.DEMA,
    RegularMethods.TMA,
    RegularMethods.TEMA,
    RegularMethods.WSMA,
    RegularMethods.SMM,
    RegularMethods.SWMA,
    RegularMethods.TRIMA,
    RegularMethods.LIN_REG,
    RegularMethods.VIDYA,
})


METHOD_REGISTRY: Dict[RegularMethods, Type[Method]] = {
    RegularMethods.SMA: SMA,
    RegularMethods.WMA: WMA,
    RegularMethods.HMA: HMA,
    RegularMethods.RMA: RMA,
    RegularMethods.EMA: EMA,
    RegularMethods.DMA: DMA,
    RegularMethods.DEMA: DEMA,
    RegularMethods.TMA: TMA,
    RegularMethods.TEMA: TEMA,
    RegularMethods.WSMA: WSMA,
    RegularMethods.SMM: SMM,
    RegularMethods.SWMA: SWMA,
    RegularMethods.TRIMA: TRIMA,
    RegularMethods.LIN_REG: LinReg,
    RegularMethods.VIDYA: Vidya,
    RegularMethods.PAST: Past,
    RegularMethods.DERIVATIVE: Derivative,
    RegularMethods.INTEGRAL: Integral,
    RegularMethods.ST_DEV: StDev,
    RegularMethods.MOMENTUM: Momentum,
    RegularMethods.RATE_OF_CHANGE: RateOfChange,
    RegularMethods.HIGHEST: Highest,
    RegularMethods.LOWEST: Lowest,
    RegularMethods.HIGHEST_LOWEST_DELTA: HighestLowestDelta,
    RegularMethods.MEAN_ABS_DEV: MeanAbsDev,
    RegularMethods.MEDIAN_ABS_DEV: MedianAbsDev,
    RegularMethods.CCI: CCI,
    RegularMethods.VOLATILITY: LinearVolatility,
}


def method(name: Union[str, RegularMethods], length: int, value: float) -> Method:
    """Regular method *name* with window *length*, seeded with *value*."""
    kind = RegularMethods.parse(name)
    return METHOD_REGISTRY[kind](length, value)


def regular_method_names() -> List[str]:
    """Sorted canonical names (aliases excluded)."""
    return sorted(kind.value for kind in RegularMethods)


# ===========================================================================
# MA  -- moving average constructor parsed from "<name>-<period>"
# ===========================================================================

@dataclass(frozen=True)
class MA(MovingAverageConstructor):
    """A moving average kind plus its period, e.g. ``MA.parse("ema-10")``."""
    kind: RegularMethods
    period: int

    def __post_init__(self) -> None:
        if not self.kind.is_moving_average():
            raise WrongMethodParameters(f"{self.kind.value} is not a moving average")

    @classmethod
    def parse(cls, text: str) -> "MA":
        """Parse ``"<name>-<period>"``; raises WrongMethodParameters."""
        name, sep, period = str(text).strip().rpartition("-")
        if not sep or not name or not period.isdigit():
            raise WrongMethodParameters(f"Cannot parse moving average {text!r}, expected e.g. 'ema-10'")
        return cls(RegularMethods.parse(name), int(period))

    def init(self, value: float) -> Method:
        return method(self.kind, self.period, value)

    def ma_period(self) -> int:
        return self.period

    def ma_type(self) -> RegularMethods:
        return self.kind

    def __str__(self) -> str:
        return f"{self.kind.value}-{self.period}"
