# src/taskline/core/parser.py

"""
Line parsing helpers.

Pure functions: no state, no I/O. Case is preserved here; command names are
compared case-insensitively by the validator.
"""

from __future__ import annotations

import re

from .errors import MissingSeparator, NotANumber

INDEX_RE = re.compile(r"^[+-]?[0-9]+$")


def get_command(line: str) -> str:
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def get_details(line: str) -> str:
    parts = line.split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


def parse_index(raw: str) -> int:
    """Parse a base-10 integer (optional sign, ASCII digits only)."""
    text = raw.strip()
    if not INDEX_RE.match(text):
        raise NotANumber(text)
    return int(text)


def get_index(line: str) -> int:
    return parse_index(get_details(line))


def string_split(details: str, separator: str) -> tuple[str, str]:
    """Split on the first literal `separator`; raise MissingSeparator if absent."""
    left, sep, right = details.partition(separator)
    if not sep:
        raise MissingSeparator(separator)
    return left, right
