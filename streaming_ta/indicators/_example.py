# -*- coding: utf-8 -*-
"""streaming_ta indicators – example indicator.

Shows how an indicator is put together: a Config dataclass registered by
name, an Instance owning its methods, signals combined through ``Action``.

The indicator watches the chosen ``source`` cross a fixed ``price`` and
keeps reporting the last cross for ``period`` more bars.

Result: values ``[source]``, signals ``[held cross, constant 0.5 buy]``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from ..core import (
    Action,
    IndicatorConfig,
    IndicatorInstance,
    IndicatorResult,
    ParameterParse,
    Source,
    register_indicator,
    source,
)
from ..methods import Cross


@register_indicator
@dataclass
class Example(IndicatorConfig):
    NAME = "Example"

    price: float = 2.0
    period: int = 3
    source: Source = field(default=Source.CLOSE)

    def validate(self) -> bool:
        return self.price > 0.0 and self.period >= 0

    def set(self, name: str, value: str) -> None:
        if name == "price":
            self.price = self._parse(name, value, float)
        elif name == "period":
            self.period = self._parse(name, value, int)
        elif name == "source":
            self.source = self._parse(name, value, Source.parse)
        else:
            raise ParameterParse(name, value)

    def size(self) -> Tuple[int, int]:
        return 1, 2

    def is_volume_based(self) -> bool:
        return self.source in (Source.VOLUME, Source.VOLUMED_PRICE)

    def _new_instance(self, candle: Any) -> "ExampleInstance":
        return ExampleInstance(self, candle)


class ExampleInstance(IndicatorInstance):

    def __init__(self, cfg: Example, candle: Any) -> None:
        self.cfg = cfg
        self.cross = Cross(None, (source(candle, cfg.source), cfg.price))
        self.last_signal = Action.NONE
        self.last_signal_position = 0

    def next(self, candle: Any) -> IndicatorResult:
        value = source(candle, self.cfg.source)
        new_signal = self.cross.next((value, self.cfg.price))

        if new_signal.is_some():
            self.last_signal = new_signal
            self.last_signal_position = 0
        elif self.last_signal.is_some():
            self.last_signal_position += 1
            if self.last_signal_position > self.cfg.period:
                self.last_signal = Action.NONE

        some_other_signal = Action.from_ratio(0.5)
        return IndicatorResult([value], [self.last_signal, some_other_signal])
