"""Core abstractions for the classical factor searches."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SearchOutcome(str, Enum):
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class FactorResult:
    """Result of a single factor search.

    ``sentinel`` is the integer the search would have returned on failure
    in a plain-int API (``N`` for the Shor search, ``1`` for the log search).
    """
    number: int
    outcome: SearchOutcome
    method: str
    factor: int | None = None
    sentinel: int | None = None
    base: int | None = None
    period: int | None = None
    rounds: int = 0
    attempts: int = 0

    @classmethod
    def found(cls, number: int, factor: int, method: str, **kwargs) -> "FactorResult":
        return cls(number=number, outcome=SearchOutcome.FOUND, method=method, factor=factor, **kwargs)

    @classmethod
    def exhausted(cls, number: int, sentinel: int, method: str, **kwargs) -> "FactorResult":
        return cls(number=number, outcome=SearchOutcome.EXHAUSTED, method=method, sentinel=sentinel, **kwargs)

    @property
    def success(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    @property
    def is_divisor(self) -> bool:
        """True when the candidate factor actually divides ``number``."""
        if self.factor is None or self.factor == 0:
            return False
        return self.number % self.factor == 0

    @property
    def factors(self) -> Optional[tuple[int, int]]:
        if not self.success or not self.is_divisor:
            return None
        return (self.factor, self.number // self.factor)

    def as_int(self) -> int:
        """Collapse to the factor on success, or the sentinel otherwise."""
        if self.success:
            return self.factor
        return self.sentinel


class FactorSearch(ABC):
    """Abstract base class for factor search strategies."""

    @abstractmethod
    def run(self, number: int, base: Optional[int] = None) -> FactorResult:
        """Search for a nontrivial factor of ``number``.

        Args:
            number: The integer to factorize.
            base: Starting base 'a'. If None (or 0), one is sampled.

        Returns:
            FactorResult with outcome FOUND or EXHAUSTED.
        """
        pass
