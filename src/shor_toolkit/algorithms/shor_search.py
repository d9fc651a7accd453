"""Classical Shor-style factor search.

Picks a base ``a``, takes its order (or the cheap proxy ``a^j mod N``) as
``r`` and tests ``gcd(a^(r/2) mod N ± 1, N)``. On failure the base is
bumped by one and the proxy recomputed; a degenerate base starts a fresh
round from a random odd base.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core import FactorResult, FactorSearch
from ..cycle import get_cycle
from ..utils import gcd, mod_pow, random_base

logger = logging.getLogger(__name__)

DEFAULT_RETRIES = 4096


class ShorFactorSearch(FactorSearch):
    """Order-finding + GCD extraction with reseeding and a retry budget."""

    def __init__(
        self,
        retries: int = DEFAULT_RETRIES,
        use_cycle: bool = False,
        workers: Optional[int] = None,
    ):
        """
        Args:
            retries: Failed inner iterations allowed before giving up.
            use_cycle: Seed each round with the concurrent order finder
                instead of the ``a^2 mod N`` proxy.
            workers: Thread count for the order finder.
        """
        self.retries = retries
        self.use_cycle = use_cycle
        self.workers = workers

    @property
    def method(self) -> str:
        return "shor_cycle" if self.use_cycle else "shor_proxy"

    def run(self, number: int, base: Optional[int] = None) -> FactorResult:
        if number < 2:
            raise ValueError(f"number must be >= 2, got {number}")

        budget = self.retries
        if budget <= 0:
            return FactorResult.exhausted(number, sentinel=number, method=self.method, base=base)

        a = base if base else random_base(number)
        rounds = 0
        attempts = 0

        while True:
            rounds += 1
            j = 2
            f = gcd(a, number)
            if f == number:
                logger.debug("round %d: base %s is a multiple of %s, resampling", rounds, a, number)
                a = random_base(number)
                continue

            if self.use_cycle and f == 1:
                r = get_cycle(a, number, workers=self.workers)
            else:
                r = mod_pow(a, j, number)
            period = r

            while True:
                f = gcd(a, number)
                if f == number:
                    break
                if f != 1:
                    return self._found(number, f, a, period, rounds, attempts)

                t1 = mod_pow(a, r >> 1, number) + 1
                t2 = t1 - 2

                f1 = gcd(t1, number)
                if f1 != 1 and f1 != number:
                    return self._found(number, f1, a, period, rounds, attempts)
                f2 = gcd(t2, number)
                if f2 != 1 and f2 != number:
                    return self._found(number, f2, a, period, rounds, attempts)

                a += 1
                attempts += 1
                budget -= 1
                if budget == 0:
                    logger.debug("retry budget exhausted for %s after %d rounds", number, rounds)
                    return FactorResult.exhausted(
                        number,
                        sentinel=number,
                        method=self.method,
                        base=a,
                        rounds=rounds,
                        attempts=attempts,
                    )

                r = mod_pow(a, j, number)
                j += 2
                if r < 0:
                    logger.warning("negative residue %s for a=%s mod %s, resampling", r, a, number)
                    break

            a = random_base(number)

    def _found(self, number: int, factor: int, base: int, period: int, rounds: int, attempts: int) -> FactorResult:
        logger.debug("found factor %s of %s with base %s", factor, number, base)
        return FactorResult.found(
            number,
            factor,
            method=self.method,
            base=base,
            period=period,
            rounds=rounds,
            attempts=attempts,
        )
