"""
Region markers for annotated script sources.

Regions are named, nestable spans of lines delimited by ``#region <name>``
and ``#endregion`` lines. Only the region named ``Script`` is published.
"""

from script_deploy.regions.markers import (
    ENDREGION_PREFIX,
    NAME_OFFSET,
    REGION_PREFIX,
    SCRIPT_REGION,
    CloseMarker,
    OpenMarker,
    RegionMarker,
    parse_marker,
)

__all__ = [
    "CloseMarker",
    "ENDREGION_PREFIX",
    "NAME_OFFSET",
    "OpenMarker",
    "REGION_PREFIX",
    "RegionMarker",
    "SCRIPT_REGION",
    "parse_marker",
]
