# -*- coding: utf-8 -*-
"""streaming_ta core – pandas adapters.

Replay methods and indicators row by row over ``pd.Series`` /
``pd.DataFrame`` inputs.  State is never rebuilt from vectorised output:
every row goes through ``next`` exactly once, in index order.
"""
from __future__ import annotations

import warnings
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from ._candles import Candle
from ._indicator import IndicatorConfig, IndicatorConfigDyn, IndicatorResult
from ._method import Method

OHLCV_COLUMNS: Tuple[str, ...] = ("open", "high", "low", "close", "volume")


# ---------------------------------------------------------------------------
# Output-name helpers
# ---------------------------------------------------------------------------

def resolve_output_names(
        base_names: List[str], spec: Dict[str, Any]
) -> Tuple[Optional[List[str]], Optional[str]]:
    """Apply prefix / suffix / col_names overrides from *spec*."""
    names = list(base_names)
    delimiter = spec.get("delimiter", "_")
    prefix = spec.get("prefix") or ""
    suffix = spec.get("suffix") or ""
    if prefix:
        prefix = f"{prefix}{delimiter}"
    if suffix:
        suffix = f"{delimiter}{suffix}"
    if prefix or suffix:
        names = [f"{prefix}{n}{suffix}" for n in names]
    col_names = spec.get("col_names")
    if col_names is not None:
        if not isinstance(col_names, tuple):
            col_names = (col_names,)
        if len(col_names) < len(names):
            return None, f"[!] col_names too short: {len(col_names)} < {len(names)}"
        names = list(col_names[: len(names)])
    return names, None


def indicator_output_names(name: str, size: Tuple[int, int]) -> List[str]:
    """``NAME_v0 … NAME_s0 …`` for a result of shape *size*."""
    base = name.upper()
    values, signals = size
    return [f"{base}_v{i}" for i in range(values)] + [f"{base}_s{i}" for i in range(signals)]


# ---------------------------------------------------------------------------
# Frame -> bars
# ---------------------------------------------------------------------------

def candles_from_frame(df: pd.DataFrame) -> List[Candle]:
    """One :class:`Candle` per row; a missing ``volume`` column reads as 0.

    Rows with a NaN price are skipped with a warning.
    """
    columns = [c for c in OHLCV_COLUMNS if c in df.columns]
    missing = set(OHLCV_COLUMNS[:4]) - set(columns)
    if missing:
        raise KeyError(f"DataFrame is missing columns: {sorted(missing)}")

    candles: List[Candle] = []
    skipped = 0
    for row in df[columns].itertuples(index=False, name=None):
        bar = dict(zip(columns, row))
        if any(pd.isna(bar[k]) for k in OHLCV_COLUMNS[:4]):
            skipped += 1
            continue
        if pd.isna(bar.get("volume", 0.0)):
            bar["volume"] = 0.0
        candles.append(Candle.from_bar(bar))
    if skipped:
        warnings.warn(
            f"candles_from_frame skipped {skipped} row(s) with NaN prices.",
            UserWarning,
            stacklevel=2,
        )
    return candles


# ---------------------------------------------------------------------------
# Replay
# ---------------------------------------------------------------------------

def method_over_series(method: Method, series: pd.Series) -> pd.Series:
    """Outputs of *method* for every value of *series*, on the same index."""
    values = method.over(float(v) for v in series.to_numpy())
    return pd.Series(list(values), index=series.index, name=method.name)


def indicator_over_frame(
        config: Any, df: pd.DataFrame, **spec: Any
) -> pd.DataFrame:
    """Run an indicator config (static or dynamic) over an OHLCV frame.

    Values become float columns, signals become their ``ratio()`` (NaN for
    no signal).  Rows with NaN prices are dropped from the output.
    ``prefix`` / ``suffix`` / ``col_names`` in *spec* rename the columns.
    """
    if not isinstance(config, (IndicatorConfig, IndicatorConfigDyn)):
        raise TypeError(f"{type(config).__name__} is not an indicator config")

    mask = df[list(OHLCV_COLUMNS[:4])].notna().all(axis=1)
    candles = candles_from_frame(df[mask]) if mask.any() else []
    results: List[IndicatorResult] = config.over(candles)

    names, error = resolve_output_names(indicator_output_names(config.name(), config.size()), spec)
    if error:
        raise ValueError(error)

    n_values, n_signals = config.size()
    rows = []
    for result in results:
        values = list(result.values()) + [float("nan")] * (n_values - result.values_length)
        ratios = [s.ratio() for s in result.signals()]
        ratios += [None] * (n_signals - result.signals_length)
        rows.append(values + [float("nan") if r is None else r for r in ratios])
    return pd.DataFrame(rows, index=df.index[mask.to_numpy()], columns=names, dtype=float)
