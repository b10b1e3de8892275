"""
Script region extraction.

Scans an annotated source file in a single forward pass and copies the body
of the region named ``Script`` to a target, with the indentation of the
opening marker removed from every line.

The scanner tracks nested regions on a stack of names:

    #region Other          push "Other"
    junk                   dropped (outside Script)
    #endregion             pop "Other"
        #region Script     push "Script", capture on, indent = 4
        line one           -> "line one"
                           -> ""
        line two           -> "line two"
        #endregion         pop "Script", capture off

Exactly ``content_indent`` characters are dropped from each captured line,
whatever they are. Lines no longer than the indent become empty lines. Marker
lines are never emitted. A ``#endregion`` with nothing open is logged and
counted but does not stop the scan.

Usage:
    from script_deploy.extractor import copy_script, extract_text

    stats = copy_script("Script.cs", "out/script.cs")
    body = extract_text(source_text)
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from script_deploy.errors import (
    DestinationDirectoryError,
    DestinationUnavailableError,
    ScriptIOError,
    SourceUnavailableError,
)
from script_deploy.regions.markers import SCRIPT_REGION, CloseMarker, OpenMarker, parse_marker

LOG = logging.getLogger("extractor")


@dataclass
class ExtractionStats:
    """Counters for one extraction pass."""

    lines_read: int = 0
    lines_written: int = 0
    mismatched_lines: list[int] = field(default_factory=list)
    unclosed_regions: list[str] = field(default_factory=list)


class RegionScanner:
    """
    Single-pass, stateful scanner for the Script region.

    Feed lines one at a time, without terminators. Each call returns the
    output line for that input (also without terminator) or None when the
    line produces no output.
    """

    def __init__(self) -> None:
        self._regions: list[str] = []
        self._in_content = False
        self._content_indent = 0
        self._stats = ExtractionStats()

    @property
    def in_content(self) -> bool:
        return self._in_content

    @property
    def content_indent(self) -> int:
        return self._content_indent

    @property
    def depth(self) -> int:
        return len(self._regions)

    @property
    def stats(self) -> ExtractionStats:
        self._stats.unclosed_regions = list(self._regions)
        return self._stats

    def feed(self, line: str) -> str | None:
        self._stats.lines_read += 1
        marker = parse_marker(line)

        if isinstance(marker, OpenMarker):
            self._regions.append(marker.name)
            if marker.is_script:
                self._in_content = True
                # parse_marker guarantees a '#' after the leading whitespace
                self._content_indent = line.index("#")
            return None

        if isinstance(marker, CloseMarker):
            if not self._regions:
                LOG.warning("Mismatched regions: #endregion without #region at line %d", self._stats.lines_read)
                self._stats.mismatched_lines.append(self._stats.lines_read)
            elif self._regions.pop() == SCRIPT_REGION:
                self._in_content = False
            return None

        if not self._in_content:
            return None

        self._stats.lines_written += 1
        if len(line) > self._content_indent:
            return line[self._content_indent :]
        return ""


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def extract_region(lines: Iterable[str], scanner: RegionScanner | None = None) -> Iterator[str]:
    """
    Yield the de-indented Script body, one newline-terminated line at a time.

    Args:
        lines: Source lines, with or without trailing newlines
        scanner: Optional scanner to use, so callers can read its stats afterwards

    Yields:
        Output lines, each ending with a single "\\n"
    """
    scanner = scanner if scanner is not None else RegionScanner()
    for line in lines:
        out = scanner.feed(_strip_terminator(line))
        if out is not None:
            yield out + "\n"


def extract_text(text: str) -> str:
    """Extract the Script body from a whole source string."""
    return "".join(extract_region(io.StringIO(text)))


def ensure_directory(path: Path) -> None:
    """Create ``path`` and its parents if absent."""
    if path.is_dir():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DestinationDirectoryError(f"Cannot create directory {path}: {exc}", path) from exc
    LOG.debug("Created directory %s", path)


def _read_lines(source: TextIO, source_path: Path) -> Iterator[str]:
    try:
        for line in source:
            yield line
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptIOError(f"Read from {source_path} failed: {exc}", source_path) from exc


def copy_script(source_path: Path | str, target_path: Path | str) -> ExtractionStats:
    """
    Copy the Script region of ``source_path`` into ``target_path``.

    The target's parent directory is created if absent and any existing target
    file is truncated. Output lines always end with "\\n". On a mid-stream
    failure whatever was already written stays on disk.

    Args:
        source_path: Annotated source file (read as UTF-8)
        target_path: File to write the extracted body to

    Returns:
        ExtractionStats for the pass

    Raises:
        SourceUnavailableError: Source cannot be opened
        DestinationDirectoryError: Target directory cannot be created
        DestinationUnavailableError: Target cannot be opened for writing
        ScriptIOError: A read or write failed after both files were opened
    """
    source_path = Path(source_path)
    target_path = Path(target_path)

    try:
        source = source_path.open("r", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise SourceUnavailableError(f"Cannot open source {source_path}: {exc}", source_path) from exc

    scanner = RegionScanner()
    with source:
        ensure_directory(target_path.parent)

        try:
            target = target_path.open("w", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise DestinationUnavailableError(f"Cannot open target {target_path}: {exc}", target_path) from exc

        try:
            with target:
                for out in extract_region(_read_lines(source, source_path), scanner):
                    target.write(out)
        except OSError as exc:
            raise ScriptIOError(f"Write to {target_path} failed: {exc}", target_path) from exc

    stats = scanner.stats
    if stats.unclosed_regions:
        LOG.debug("Regions still open at end of %s: %s", source_path, stats.unclosed_regions)
    LOG.info(
        "Copied %d of %d lines from %s to %s",
        stats.lines_written,
        stats.lines_read,
        source_path,
        target_path,
    )
    return stats
