"""Line search module for Cacher."""

from .config import ConfigError, SearchConfig
from .search import run, search, search_case_insensitive, split_lines

__all__ = [
    "ConfigError",
    "SearchConfig",
    "run",
    "search",
    "search_case_insensitive",
    "split_lines",
]
