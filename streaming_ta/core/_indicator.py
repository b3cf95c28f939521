# -*- coding: utf-8 -*-
"""streaming_ta core – indicator Config / Instance / Result and the dynamic bridge.

Every indicator is a pair:

* a **Config** (:class:`IndicatorConfig`): parameters, ``validate()``,
  ``set(name, value)`` and the result shape ``size()``;
* an **Instance** (:class:`IndicatorInstance`): per-series state created by
  ``config.init(first_bar)`` and stepped with ``next(bar)``.

Heterogeneous indicators are held through :class:`IndicatorConfigDyn` /
:class:`IndicatorInstanceDyn`.  Those interfaces do not depend on the
static ones; :class:`DynConfig` and :class:`DynInstance` bridge any static
pair to them, so no indicator writes dynamic boilerplate.

Config classes register themselves in ``INDICATOR_REGISTRY`` at import time
(see :func:`register_indicator`).
"""
from __future__ import annotations

import copy
import warnings
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple, Type

from ._action import Action
from ._errors import ParameterParse, WrongConfig


# ===========================================================================
# Result
# ===========================================================================

class IndicatorResult:
    """Up to ``SIZE`` raw values and ``SIZE`` signals produced by one step."""

    SIZE = 4

    __slots__ = ("_values", "_signals")

    def __init__(self, values: Sequence[float] = (), signals: Sequence[Action] = ()) -> None:
        if len(values) > self.SIZE or len(signals) > self.SIZE:
            warnings.warn(
                f"IndicatorResult holds at most {self.SIZE} values and "
                f"{self.SIZE} signals; extra entries are dropped.",
                UserWarning,
                stacklevel=2,
            )
        self._values: Tuple[float, ...] = tuple(float(v) for v in values[: self.SIZE])
        self._signals: Tuple[Action, ...] = tuple(signals[: self.SIZE])

    def values(self) -> Tuple[float, ...]:
        return self._values

    def signals(self) -> Tuple[Action, ...]:
        return self._signals

    def value(self, index: int) -> float:
        assert index < len(self._values), f"value index {index} out of range"
        return self._values[index]

    def signal(self, index: int) -> Action:
        assert index < len(self._signals), f"signal index {index} out of range"
        return self._signals[index]

    @property
    def values_length(self) -> int:
        return len(self._values)

    @property
    def signals_length(self) -> int:
        return len(self._signals)

    def size(self) -> Tuple[int, int]:
        """``(count of raw values, count of signals)``."""
        return len(self._values), len(self._signals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndicatorResult):
            return NotImplemented
        return self._values == other._values and self._signals == other._signals

    def __hash__(self) -> int:
        return hash((self._values, self._signals))

    def __repr__(self) -> str:
        signals = ", ".join(str(s) for s in self._signals)
        values = ", ".join(f"{v:>7.4f}" for v in self._values)
        return f"S: [{signals}], V: [{values}]"


# ===========================================================================
# Static contract
# ===========================================================================

class IndicatorConfig(ABC):
    """Parameters of one indicator.

    Subclasses set ``NAME`` and implement ``validate``, ``set``, ``size``
    and ``_new_instance``.
    """

    NAME: str = ""

    @abstractmethod
    def validate(self) -> bool:
        """True when the parameters are consistent."""

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Set parameter *name* from its string form; raises ParameterParse."""

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """``(count of raw values, count of signals)`` of every result."""

    @abstractmethod
    def _new_instance(self, candle: Any) -> "IndicatorInstance":
        """Build the instance state from an already validated config."""

    def init(self, candle: Any) -> "IndicatorInstance":
        """Validate and create the per-series state seeded with *candle*.

        The instance keeps its own copy of the config, later ``set`` calls
        do not reach it.
        """
        if not self.validate():
            raise WrongConfig(f"Invalid config for indicator {self.name()}: {self!r}")
        return copy.deepcopy(self)._new_instance(candle)

    def over(self, candles: Iterable[Any]) -> List["IndicatorResult"]:
        """Results for every candle, the instance seeded with the first one."""
        candles = list(candles)
        if not candles:
            return []
        return self.init(candles[0]).over(candles)

    def is_volume_based(self) -> bool:
        return False

    def name(self) -> str:
        return self.NAME or type(self).__name__

    @staticmethod
    def _parse(name: str, value: str, cast: Callable[[str], Any]) -> Any:
        """Shared string parsing for ``set`` implementations."""
        try:
            return cast(value)
        except (TypeError, ValueError):
            raise ParameterParse(name, value) from None


class IndicatorInstance(ABC):
    """Per-series state of one indicator."""

    cfg: IndicatorConfig

    def config(self) -> IndicatorConfig:
        return self.cfg

    @abstractmethod
    def next(self, candle: Any) -> IndicatorResult:
        """Consume one bar and return one result."""

    def over(self, candles: Iterable[Any]) -> List[IndicatorResult]:
        return [self.next(candle) for candle in candles]

    def size(self) -> Tuple[int, int]:
        return self.config().size()

    def name(self) -> str:
        return self.config().name()

    def is_volume_based(self) -> bool:
        return self.config().is_volume_based()


# ===========================================================================
# Dynamic boundary
# ===========================================================================

class IndicatorConfigDyn(ABC):
    """Config handle used without knowing the concrete indicator type."""

    @abstractmethod
    def init(self, candle: Any) -> "IndicatorInstanceDyn": ...

    @abstractmethod
    def over(self, candles: Iterable[Any]) -> List[IndicatorResult]: ...

    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def validate(self) -> bool: ...

    @abstractmethod
    def set(self, name: str, value: str) -> None: ...

    @abstractmethod
    def size(self) -> Tuple[int, int]: ...


class IndicatorInstanceDyn(ABC):
    """Instance handle used without knowing the concrete indicator type."""

    @abstractmethod
    def next(self, candle: Any) -> IndicatorResult: ...

    @abstractmethod
    def over(self, candles: Iterable[Any]) -> List[IndicatorResult]: ...

    @abstractmethod
    def config(self) -> IndicatorConfigDyn: ...

    @abstractmethod
    def size(self) -> Tuple[int, int]: ...

    @abstractmethod
    def name(self) -> str: ...


class DynConfig(IndicatorConfigDyn):
    """Bridges any :class:`IndicatorConfig` to :class:`IndicatorConfigDyn`."""

    __slots__ = ("inner",)

    def __init__(self, inner: IndicatorConfig) -> None:
        self.inner = inner

    def init(self, candle: Any) -> "DynInstance":
        return DynInstance(self.inner.init(candle))

    def over(self, candles: Iterable[Any]) -> List[IndicatorResult]:
        return self.inner.over(candles)

    def name(self) -> str:
        return self.inner.name()

    def validate(self) -> bool:
        return self.inner.validate()

    def set(self, name: str, value: str) -> None:
        self.inner.set(name, value)

    def size(self) -> Tuple[int, int]:
        return self.inner.size()

    def __repr__(self) -> str:
        return f"DynConfig({self.inner!r})"


class DynInstance(IndicatorInstanceDyn):
    """Bridges any :class:`IndicatorInstance` to :class:`IndicatorInstanceDyn`."""

    __slots__ = ("inner",)

    def __init__(self, inner: IndicatorInstance) -> None:
        self.inner = inner

    def next(self, candle: Any) -> IndicatorResult:
        return self.inner.next(candle)

    def over(self, candles: Iterable[Any]) -> List[IndicatorResult]:
        return self.inner.over(candles)

    def config(self) -> DynConfig:
        return DynConfig(self.inner.config())

    def size(self) -> Tuple[int, int]:
        return self.inner.size()

    def name(self) -> str:
        return self.inner.name()

    def __repr__(self) -> str:
        return f"DynInstance({self.inner!r})"


def as_dyn(obj: Any) -> Any:
    """Erase the concrete type of a config or an instance."""
    if isinstance(obj, (IndicatorConfigDyn, IndicatorInstanceDyn)):
        return obj
    if isinstance(obj, IndicatorConfig):
        return DynConfig(obj)
    if isinstance(obj, IndicatorInstance):
        return DynInstance(obj)
    raise TypeError(f"{type(obj).__name__} is neither an indicator config nor an instance")


# ===========================================================================
# Registry  (populated by indicator modules at import time)
# ===========================================================================

INDICATOR_REGISTRY: Dict[str, Type[IndicatorConfig]] = {}


def register_indicator(cls: Type[IndicatorConfig]) -> Type[IndicatorConfig]:
    """Class decorator adding a config type to ``INDICATOR_REGISTRY``."""
    INDICATOR_REGISTRY[(cls.NAME or cls.__name__).lower()] = cls
    return cls


def indicator_config(name: str, **params: Any) -> IndicatorConfigDyn:
    """Default config of indicator *name* with *params* applied through ``set``."""
    cls = INDICATOR_REGISTRY.get(name.strip().lower())
    if cls is None:
        raise WrongConfig(f"Indicator '{name}' not found in INDICATOR_REGISTRY")
    config = cls()
    for key, value in params.items():
        config.set(key, str(value))
    return DynConfig(config)


def supported_indicators() -> List[str]:
    """Sorted names of the registered indicators."""
    return sorted(INDICATOR_REGISTRY)
