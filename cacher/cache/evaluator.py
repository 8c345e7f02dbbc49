"""
Memoizing Evaluator Module

This module wraps a pure, single-argument computation and caches its
results by input value.

Guarantees:
- Each distinct input is computed at most once per evaluator
- A computation that raises leaves the cache untouched for that input
- Entries are never evicted or overwritten
"""

import logging
from typing import Any, Callable, Dict, Generic, Hashable, TypeVar

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=Hashable)
V = TypeVar("V")


class Evaluator(Generic[U, V]):
    """
    Memoizing wrapper around a pure unary computation.

    The evaluator owns both the computation and its cache. Inputs must be
    hashable since they are used as dict keys.

    Usage:
        square = Evaluator(lambda x: x * x)
        square.value(4)  # computes 16
        square.value(4)  # returns cached 16

    Not safe for concurrent use; guard with a lock or use one instance
    per thread.

    Attributes:
        computation: The wrapped callable
    """

    def __init__(self, computation: Callable[[U], V]):
        """
        Initialize the evaluator.

        Args:
            computation: Deterministic callable taking one argument

        Raises:
            TypeError: If computation is not callable
        """
        if not callable(computation):
            raise TypeError("computation must be callable")
        self.computation = computation
        self._values: Dict[U, V] = {}
        self._hits = 0
        self._misses = 0

    def value(self, arg: U) -> V:
        """
        Return computation(arg), computing it only on the first request.

        Args:
            arg: Input to the computation

        Returns:
            The stored or freshly computed result

        Raises:
            TypeError: If arg is unhashable
            Any exception raised by the computation, unchanged
        """
        if arg in self._values:
            self._hits += 1
            logger.debug(f"Cache hit for {arg!r}")
            return self._values[arg]

        self._misses += 1
        logger.debug(f"Cache miss for {arg!r}, computing")
        result = self.computation(arg)
        # Only stored once the computation returned
        self._values[arg] = result
        return result

    def contains(self, arg: U) -> bool:
        """Check whether arg has a cached result."""
        return arg in self._values

    def size(self) -> int:
        """Get the number of cached inputs."""
        return len(self._values)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the evaluator.

        Returns:
            Dictionary containing:
            - size: Number of cached inputs
            - hits: Lookups answered from the cache
            - misses: Lookups that invoked the computation
            - hit_rate: hits as a fraction of all lookups
        """
        lookups = self._hits + self._misses
        return {
            "size": len(self._values),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": self._hits / lookups if lookups > 0 else 0,
        }
