"""Experiment utilities for collecting factor search metrics into pandas DataFrames."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .algorithms.log_search import DEFAULT_KMAX, DEFAULT_LOG_RETRIES
from .algorithms.shor_search import DEFAULT_RETRIES
from .runner import run_factor


@dataclass(frozen=True)
class SearchSetting:
    """Conditions for a sweep (search method and budgets)."""

    label: str
    method: str = "shor"
    retries: Optional[int] = None
    kmax: int = DEFAULT_KMAX
    use_cycle: bool = False

    def search_kwargs(self) -> dict:
        if self.method == "shor":
            retries = DEFAULT_RETRIES if self.retries is None else self.retries
            return {"retries": retries, "use_cycle": self.use_cycle}
        retries = DEFAULT_LOG_RETRIES if self.retries is None else self.retries
        return {"kmax": self.kmax, "retries": retries}


def sweep_factor_searches(
    numbers: Sequence[int],
    repeats: int = 1,
    settings: Optional[Sequence[SearchSetting]] = None,
) -> pd.DataFrame:
    """Run factor searches repeatedly and collect metrics into a DataFrame.

    Parameters
    ----------
    numbers : Sequence[int]
        Numbers to factor.
    repeats : int
        How many times to repeat each (setting, number) pair.
    settings : Sequence[SearchSetting]
        Search scenarios. Defaults to [shor with default budget].
    """

    if settings is None:
        settings = (SearchSetting(label="shor"),)

    records: list[dict] = []

    for setting in settings:
        for number in numbers:
            for repeat in range(repeats):
                start = time.perf_counter()
                result = run_factor(number, method=setting.method, **setting.search_kwargs())
                elapsed = time.perf_counter() - start

                records.append(
                    {
                        "label": setting.label,
                        "number": number,
                        "repeat": repeat,
                        "method": result.method,
                        "success": result.success,
                        "factor": result.factor,
                        "value": result.as_int(),
                        "base": result.base,
                        "period": result.period,
                        "rounds": result.rounds,
                        "attempts": result.attempts,
                        "elapsed_s": elapsed,
                    }
                )

    return pd.DataFrame.from_records(records)


def summarize_success(df: pd.DataFrame) -> pd.DataFrame:
    """Aggregate success rate and median elapsed time per label/number pair."""

    if df.empty:
        return df

    summary = df.groupby(["label", "number"], as_index=False).agg(
        success_rate=("success", "mean"),
        median_elapsed_s=("elapsed_s", lambda s: float(np.median(s))),
        runs=("success", "size"),
    )
    return summary
