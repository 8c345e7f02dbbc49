"""
Line Search Module

Grep-style filters that keep the lines of a text containing a query.
"""

import logging
import sys
from typing import List, Optional, TextIO

from ..config.settings import settings
from .config import SearchConfig

logger = logging.getLogger(__name__)


def split_lines(contents: str) -> List[str]:
    r"""
    Split text on "\n" and "\r\n" only.

    Other separators such as form feeds stay inside their line. A trailing
    newline does not produce a final empty line.
    """
    lines = contents.split("\n")
    # The last piece is unterminated, or empty after a trailing newline
    tail = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if tail:
        lines.append(tail)
    return lines


def search(query: str, contents: str) -> List[str]:
    """
    Return the lines of contents that contain query (case-sensitive).

    Args:
        query: Substring to look for
        contents: Text to search, split on line boundaries

    Returns:
        Matching lines in their original order, without line endings
    """
    return [line for line in split_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """Like search(), but ignoring case. Lines are returned unchanged."""
    query = query.lower()
    return [line for line in split_lines(contents) if query in line.lower()]


def run(config: SearchConfig, stream: Optional[TextIO] = None) -> List[str]:
    """
    Search the configured file and print every matching line.

    Args:
        config: What to search for and where
        stream: Output stream (default: sys.stdout)

    Returns:
        The matching lines

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid text in the configured
            encoding
    """
    out = stream if stream is not None else sys.stdout
    # newline="" keeps a lone \r inside its line
    with open(config.filename, encoding=settings.FILE_ENCODING, newline="") as f:
        contents = f.read()

    if config.case_insensitive:
        results = search_case_insensitive(config.query, contents)
    else:
        results = search(config.query, contents)

    logger.debug(
        f"{len(results)} matching lines for {config.query!r} in {config.filename}"
    )
    for line in results:
        out.write(line + "\n")
    return results
