"""
Search Configuration

Builds a SearchConfig from parsed command line arguments and the
environment.
"""

import argparse
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..config.settings import settings


class ConfigError(ValueError):
    """Raised when the command line does not describe a valid search."""


@dataclass
class SearchConfig:
    """
    Represents a single search request.

    Attributes:
        query: Substring to look for
        filename: Path of the file to search
        case_insensitive: Whether case is ignored while matching
    """
    query: str
    filename: str
    case_insensitive: bool = False

    @classmethod
    def from_args(
            cls,
            args: argparse.Namespace,
            environ: Optional[Mapping[str, str]] = None,
    ) -> "SearchConfig":
        """
        Build a config from parsed arguments.

        An explicit --ignore-case / --case-sensitive flag wins. Otherwise
        the search ignores case unless CASE_SENSITIVE is set.

        Raises:
            ConfigError: If the query or the filename is missing
        """
        env = environ if environ is not None else os.environ

        query = getattr(args, "query", None)
        if query is None:
            raise ConfigError("Didn't get any query string")

        filename = getattr(args, "filename", None)
        if filename is None:
            raise ConfigError("Didn't get a file name")

        case_insensitive = getattr(args, "ignore_case", None)
        if case_insensitive is None:
            case_insensitive = settings.CASE_SENSITIVE_ENV not in env

        return cls(query=query, filename=filename, case_insensitive=case_insensitive)
