# -*- coding: utf-8 -*-
"""streaming_ta core – error types.

Only construction and configuration can fail.  Once a method or an
indicator instance exists, ``next`` never raises for inputs in its domain.
"""
from __future__ import annotations


class StreamingTAError(ValueError):
    """Base class of every error raised by streaming_ta."""


class SourceParse(StreamingTAError):
    """A string could not be parsed into a :class:`Source`."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown source '{value}'")
        self.value = value


class ParameterParse(StreamingTAError):
    """An indicator parameter is unknown or its value is unparsable."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Cannot set parameter '{name}' to '{value}'")
        self.name = name
        self.value = value


class WrongMethodParameters(StreamingTAError):
    """Invalid parameters for method creation."""


class WrongConfig(StreamingTAError):
    """An indicator config failed ``validate()``."""


class InvalidCandles(StreamingTAError):
    """Seed observation is outside the domain of the method (NaN, inf)."""
