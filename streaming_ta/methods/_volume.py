# -*- coding: utf-8 -*-
"""streaming_ta methods – volume based transforms over bars."""
from __future__ import annotations

from typing import Any

from ..core import Method, Window, clv
from ._common import _check_length


# ===========================================================================
# ADI  -- Accumulation / Distribution Index
# ===========================================================================
# CLV = (2*close - (high + low)) / (high - low),  0 when high == low
# ADI = sum(CLV * volume) over the last ``length`` bars,
#       over every bar when length == 0

class ADI(Method):
    """Accumulation / distribution over bars with volume."""

    def __init__(self, length: int, value: Any) -> None:
        length = _check_length(length, "ADI", minimum=0)
        clvv = clv(value) * value.volume
        self.cmf_sum = clvv * length
        self.window: Window[float] = Window.create(length, clvv)

    def next(self, value: Any) -> float:
        clvv = clv(value) * value.volume
        self.cmf_sum += clvv
        if not self.window.is_empty():
            self.cmf_sum -= self.window.push(clvv)
        return self.cmf_sum


AD = ADI
