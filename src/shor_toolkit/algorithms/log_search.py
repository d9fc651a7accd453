"""Brute-force "discrete log" factor search.

For multipliers k and square roots m of k*N (halved down to 1), the
residual k*N - m^2 is measured in powers of a random base ``a``. When the
power count is usable, a^(s/2) ± m is tested against N with a GCD.

This is a heuristic. The derivation behind the candidates is not a proven
factoring identity; a returned factor is a GCD with N, so it divides N,
but whether any factor is found at all is a matter of luck and budget.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core import FactorResult, FactorSearch
from ..utils import big_pow, gcd, isqrt, random_base

logger = logging.getLogger(__name__)

DEFAULT_KMAX = 4096
DEFAULT_LOG_RETRIES = 1024


def brute_log(a: int, n: int) -> tuple[int, int]:
    """Count multiplications by ``a`` until an accumulator from 1 exceeds ``n``.

    This is not a discrete logarithm: it is the number of factors of ``a``
    needed to overshoot ``n``, together with the (non-positive) remainder
    ``n - a^count``.

    Returns:
        (count, n - a^count), or (0, n) when a > n.

    Raises:
        ValueError: If a <= 1 and a <= n; the accumulator would never
            exceed n.
    """
    if a > n:
        return 0, n
    if a <= 1:
        raise ValueError(f"base must be > 1, got {a}")

    count = 0
    result = 1
    while result <= n:
        result *= a
        count += 1
    return count, n - result


class LogFactorSearch(FactorSearch):
    """Multiplier / square-root sweep with brute-force logarithms."""

    method = "log"

    def __init__(self, kmax: int = DEFAULT_KMAX, retries: int = DEFAULT_LOG_RETRIES):
        self.kmax = kmax
        self.retries = retries

    def run(self, number: int, base: Optional[int] = None) -> FactorResult:
        if number < 2:
            raise ValueError(f"number must be >= 2, got {number}")

        if number % 2 == 0:
            if number == 2:
                return FactorResult.exhausted(number, sentinel=1, method=self.method)
            return FactorResult.found(number, 2, method="log_trivial_even", base=2)

        attempts = 0
        for retry in range(self.retries):
            if retry == 0 and base is not None and base > 1:
                a = base
            else:
                a = random_base(number)

            for k in range(1, self.kmax + 1):
                kn = k * number
                m = isqrt(kn)
                while m >= 1:
                    res = kn - m * m
                    s, rem = brute_log(a, res)
                    if rem != 0 and s % 2 == 0:
                        m >>= 1
                        continue

                    attempts += 1
                    p = big_pow(a, s >> 1)
                    for t in (p - m, p + m):
                        f = gcd(t, number)
                        if f != 1 and f != number:
                            logger.debug("found factor %s of %s (a=%s k=%s m=%s)", f, number, a, k, m)
                            return FactorResult.found(
                                number,
                                f,
                                method=self.method,
                                base=a,
                                rounds=retry + 1,
                                attempts=attempts,
                            )
                    m >>= 1

            logger.debug("round %d with base %s found nothing for %s", retry + 1, a, number)

        return FactorResult.exhausted(
            number,
            sentinel=1,
            method=self.method,
            rounds=self.retries,
            attempts=attempts,
        )
