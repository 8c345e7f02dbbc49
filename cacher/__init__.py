"""
Cacher: Memoizing Evaluator and Line Search

A small generic memoization wrapper for pure single-argument
computations, plus a grep-style line search utility.
"""

from .cache.evaluator import Evaluator

__version__ = "1.0.0"

__all__ = ["Evaluator"]
