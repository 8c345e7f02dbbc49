"""Cache module for Cacher."""

from .evaluator import Evaluator

__all__ = ["Evaluator"]
