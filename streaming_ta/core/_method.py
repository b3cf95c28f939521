# -*- coding: utf-8 -*-
"""streaming_ta core – the ``Method`` contract and sequence adapters.

A method is a stateful, single-step, deterministic streaming function::

    ma = SMA(2, 1.0)          # params, seed value
    ma.next(2.0)              # -> 1.5

Construction validates the parameters and is the only place a method can
fail (``WrongMethodParameters`` / ``InvalidCandles``).  ``next`` is defined
for every input in the method's domain; each method states whether NaN is
part of that domain.  There is no ``reset``: build a new instance instead.

Sequence adapters are written purely in terms of ``next``:

* ``Method.over(inputs)`` – a new :class:`Sequence`, one output per input.
* ``Sequence.apply(method)`` / :func:`apply` – overwrite values in place.
* ``Method.new_over`` / ``Method.new_apply`` – seed from the first element.
"""
from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, MutableSequence, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


class Sequence(list):
    """A list of time-series values with method helpers."""

    @classmethod
    def empty(cls) -> "Sequence":
        return cls()

    def apply(self, method: "Method") -> None:
        """Replace every value with ``method.next(value)``, left to right."""
        apply(method, self)

    def eval(self, method: "Method") -> "Sequence":
        """Run *method* over the values and return its outputs."""
        return method.over(self)

    def validate(self) -> bool:
        """True when every element (a bar) validates OK."""
        return all(item.validate() for item in self)


class Method(ABC):
    """Base class of every incremental transform.

    Subclasses implement ``__init__(params, value)`` and ``next(value)``.
    """

    @abstractmethod
    def next(self, value: Any) -> Any:
        """Consume one input and return one output."""

    @property
    def name(self) -> str:
        return type(self).__name__

    def iter_data(self, inputs: Iterable[Any]) -> Iterator[Any]:
        """Lazily yield ``next(x)`` for every *x* of *inputs*."""
        for value in inputs:
            yield self.next(value)

    def over(self, inputs: Iterable[Any]) -> Sequence:
        """Outputs for all *inputs*; the result always has the input's length."""
        return Sequence(self.next(value) for value in inputs)

    @classmethod
    def new_over(cls, params: Any, inputs: Iterable[Any]) -> Sequence:
        """Create the method seeded with the first input and run it over all
        of them.  An empty input gives an empty result."""
        iterator = iter(inputs)
        first = next(iterator, _MISSING)
        if first is _MISSING:
            return Sequence()
        method = cls(params, first)  # type: ignore[call-arg]
        return method.over(itertools.chain((first,), iterator))

    @classmethod
    def new_apply(cls, params: Any, data: MutableSequence[Any]) -> Optional["Method"]:
        """Create the method seeded with ``data[0]`` and apply it in place.

        Returns the method so the caller can keep streaming, or None for an
        empty *data*.
        """
        if len(data) == 0:
            return None
        method = cls(params, data[0])  # type: ignore[call-arg]
        apply(method, data)
        return method

    def __repr__(self) -> str:
        return f"{self.name}()"


def apply(method: Method, data: MutableSequence[Any]) -> None:
    """Overwrite each element of *data* with the method's output for it.

    Works for lists, :class:`Sequence` and numpy arrays.
    """
    for i in range(len(data)):
        data[i] = method.next(data[i])
