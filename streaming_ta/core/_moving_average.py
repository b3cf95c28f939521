# -*- coding: utf-8 -*-
"""streaming_ta core – moving average constructors.

Indicators that let the user pick a moving average store a constructor
instead of a class: something with a type, a period and an ``init(value)``
that builds the method.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ._base import PeriodType, ValueType
from ._method import Method


class MovingAverageConstructor(ABC):
    """Builds a moving average method of a known kind and period."""

    @abstractmethod
    def init(self, value: ValueType) -> Method:
        """New moving average seeded with *value*."""

    @abstractmethod
    def ma_period(self) -> PeriodType:
        ...

    @abstractmethod
    def ma_type(self) -> Any:
        ...

    def is_similar_to(self, other: "MovingAverageConstructor") -> bool:
        """True when both constructors build the same kind of average."""
        return self.ma_type() == other.ma_type()
