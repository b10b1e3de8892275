"""
Region marker parsing.

A region marker is a source line whose trimmed content starts with one of
two literal prefixes:

    #region <name>      opens a named region
    #endregion          closes the most recently opened region

The region name is taken from the trimmed line at a fixed offset (the prefix
plus one separator character). It is not trimmed again, so
``"#region  Script"`` opens a region named ``" Script"``.

Examples:
    >>> parse_marker("    #region Script")
    OpenMarker(name='Script')

    >>> parse_marker("#endregion // Script")
    CloseMarker()

    >>> parse_marker("var x = 1;") is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

REGION_PREFIX = "#region"
ENDREGION_PREFIX = "#endregion"

# Prefix plus exactly one separator character
NAME_OFFSET = len(REGION_PREFIX) + 1

SCRIPT_REGION = "Script"


@dataclass(frozen=True)
class OpenMarker:
    """Start of a named region."""

    name: str

    @property
    def is_script(self) -> bool:
        return self.name == SCRIPT_REGION


@dataclass(frozen=True)
class CloseMarker:
    """End of the innermost open region. Carries no name."""


RegionMarker = Union[OpenMarker, CloseMarker]


def parse_marker(line: str) -> RegionMarker | None:
    """
    Parse a single source line into a region marker.

    Args:
        line: Raw line, with or without leading indentation

    Returns:
        OpenMarker, CloseMarker, or None for an ordinary line
    """
    trimmed = line.strip()

    if trimmed.startswith(REGION_PREFIX):
        return OpenMarker(name=trimmed[NAME_OFFSET:])

    if trimmed.startswith(ENDREGION_PREFIX):
        return CloseMarker()

    return None
