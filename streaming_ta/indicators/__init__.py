# -*- coding: utf-8 -*-
"""streaming_ta.indicators – indicator catalogue.

Modules register their configs in ``INDICATOR_REGISTRY`` on import.
"""
from __future__ import annotations

from . import _example  # noqa: F401  example
from ._example import Example, ExampleInstance

__all__ = ["Example", "ExampleInstance"]
