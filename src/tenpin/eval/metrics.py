from __future__ import annotations
import numpy as np
import pandas as pd
from tenpin.constants import FRAME_COUNT

def _per_frame(df: pd.DataFrame, col: str) -> float:
    if len(df) == 0:
        return float("nan")
    return float(df[col].sum()) / (len(df) * FRAME_COUNT)

def strike_rate(df: pd.DataFrame) -> float:
    """Strikes per frame bowled (tenth-frame fill balls included)."""
    return _per_frame(df, "strikes")

def spare_rate(df: pd.DataFrame) -> float:
    return _per_frame(df, "spares")

def open_rate(df: pd.DataFrame) -> float:
    return _per_frame(df, "opens")

def score_summary(scores: np.ndarray) -> dict:
    """n / mean / std / p10 / p50 / p90 of final scores."""
    x = np.asarray(scores, dtype=np.float64)
    if x.size == 0:
        return dict(n=0, mean=np.nan, std=np.nan, p10=np.nan, p50=np.nan, p90=np.nan)
    p10, p50, p90 = np.percentile(x, [10, 50, 90])
    return dict(n=int(x.size), mean=float(x.mean()), std=float(x.std()),
                p10=float(p10), p50=float(p50), p90=float(p90))
