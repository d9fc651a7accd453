"""Runner module for the factor searches."""

from __future__ import annotations

from typing import Any, Optional

from .core import FactorResult
from .algorithms import LogFactorSearch, ShorFactorSearch
from .algorithms.log_search import DEFAULT_KMAX, DEFAULT_LOG_RETRIES
from .algorithms.shor_search import DEFAULT_RETRIES


def run_factor(
    number: int,
    base: Optional[int] = None,
    method: str = "shor",
    **kwargs: Any,
) -> FactorResult:
    """Run a factor search.

    Args:
        number: The integer to factorize.
        base: Starting base 'a'. Sampled when None.
        method: "shor" or "log".
        **kwargs: Passed to the search constructor
            (retries / use_cycle / workers for "shor", kmax / retries for "log").

    Returns:
        FactorResult object.
    """
    if method == "shor":
        algo = ShorFactorSearch(**kwargs)
    elif method == "log":
        algo = LogFactorSearch(**kwargs)
    else:
        raise ValueError(f"Unknown method: {method}")
    return algo.run(number, base)


def shor_factor(
    n: int,
    a: int = 0,
    retries: int = DEFAULT_RETRIES,
    use_cycle: bool = False,
) -> FactorResult:
    """Shor-style search; a == 0 samples a random base."""
    return ShorFactorSearch(retries=retries, use_cycle=use_cycle).run(n, a or None)


def get_factor(
    n: int,
    kmax: int = DEFAULT_KMAX,
    retries: int = DEFAULT_LOG_RETRIES,
) -> FactorResult:
    """Brute-force log search; even n short-circuits to 2."""
    return LogFactorSearch(kmax=kmax, retries=retries).run(n)
