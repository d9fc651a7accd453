"""Shor Toolkit - classical Shor-style integer factorization.

This package provides:
- Arbitrary-precision primitives (isqrt, is_prime, chunked mod_pow)
- Multiplicative order discovery (sequential and thread-pooled)
- Shor-style and brute-force-log factor searches

Subpackages:
- shor_toolkit.algorithms: factor search strategies
"""

__all__ = [
    # Results
    "FactorResult",
    "SearchOutcome",
    # Factor searches
    "run_factor",
    "shor_factor",
    "get_factor",
    "ShorFactorSearch",
    "LogFactorSearch",
    "brute_log",
    # Order finding
    "find_order",
    "get_cycle",
    "get_random_cycle",
    # Primitives
    "big_pow",
    "gcd",
    "is_prime",
    "isqrt",
    "mod_pow",
    "random_odd_positive",
    # Experiments
    "SearchSetting",
    "sweep_factor_searches",
    "summarize_success",
]

from .core import FactorResult, SearchOutcome
from .runner import run_factor, shor_factor, get_factor
from .algorithms import ShorFactorSearch, LogFactorSearch, brute_log
from .cycle import find_order, get_cycle, get_random_cycle
from .utils import big_pow, gcd, is_prime, isqrt, mod_pow, random_odd_positive
from .experiment_logging import SearchSetting, summarize_success, sweep_factor_searches
