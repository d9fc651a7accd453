"""Multiplicative order ("cycle") discovery.

``find_order`` walks the exponents one by one and always returns the least
order. ``get_cycle`` spreads the same brute-force search over a thread pool
and stops at the first match any worker publishes. Workers claim exponents
in increasing order but finish them in any order, so when two matches land
in the same scheduling window the returned value is *a* period of ``a``
rather than *the* minimal one.
"""

from __future__ import annotations

import itertools
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .utils import gcd, mod_pow, random_base

logger = logging.getLogger(__name__)


class _FirstResult:
    """Exchange-once result slot: the first offered value wins."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[int] = None
        self.stopped = threading.Event()

    def offer(self, value: int) -> bool:
        with self._lock:
            if self._value is not None:
                return False
            self._value = value
        self.stopped.set()
        return True

    @property
    def value(self) -> Optional[int]:
        with self._lock:
            return self._value


def _default_workers() -> int:
    return min(8, os.cpu_count() or 1)


def find_order(a: int, n: int, limit: Optional[int] = None) -> Optional[int]:
    """Least r >= 1 with a^r = 1 (mod n), searched sequentially.

    Returns None when gcd(a, n) != 1 (no order exists) or when ``limit``
    is given and exceeded.
    """
    if n <= 0:
        raise ValueError(f"modulus must be positive, got {n}")
    if gcd(a, n) != 1:
        return None

    target = 1 % n
    value = a % n
    r = 1
    while value != target:
        value = (value * a) % n
        r += 1
        if limit is not None and r > limit:
            return None
    return r


def get_cycle(
    a: int,
    n: int,
    workers: Optional[int] = None,
    limit: Optional[int] = None,
) -> Optional[int]:
    """Concurrent brute-force search for an exponent r with a^r = 1 (mod n).

    Parameters
    ----------
    a : int
        Base whose order is searched.
    n : int
        Modulus.
    workers : int, optional
        Thread count. Defaults to min(8, cpu_count).
    limit : int, optional
        Largest exponent tried. Unbounded when None.

    Returns
    -------
    int or None
        The first matching exponent observed before cancellation took
        effect, which may exceed the true order under concurrent
        scheduling. None if gcd(a, n) != 1 or ``limit`` was exhausted.
    """
    if n <= 0:
        raise ValueError(f"modulus must be positive, got {n}")
    if gcd(a, n) != 1:
        return None

    if workers is None:
        workers = _default_workers()
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    target = 1 % n
    slot = _FirstResult()
    exponents = itertools.count(1)
    claim_lock = threading.Lock()

    def _search() -> None:
        while not slot.stopped.is_set():
            with claim_lock:
                i = next(exponents)
            if limit is not None and i > limit:
                return
            if mod_pow(a, i, n) == target:
                slot.offer(i)
                return

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_search) for _ in range(workers)]
        for future in futures:
            future.result()

    r = slot.value
    logger.debug("get_cycle a=%s n=%s workers=%s -> %s", a, n, workers, r)
    return r


def get_random_cycle(
    n: int,
    workers: Optional[int] = None,
    limit: Optional[int] = None,
) -> tuple[int, Optional[int]]:
    """Sample a random odd base coprime with ``n`` and search its cycle.

    Returns:
        (base, cycle) where cycle follows ``get_cycle`` semantics.
    """
    if n <= 1:
        raise ValueError(f"modulus must be > 1, got {n}")

    a = random_base(n)
    while gcd(a, n) != 1:
        a = random_base(n)
    return a, get_cycle(a, n, workers=workers, limit=limit)
