from .shor_search import ShorFactorSearch
from .log_search import LogFactorSearch, brute_log

__all__ = ["ShorFactorSearch", "LogFactorSearch", "brute_log"]
