"""Read selected lines from files and combine them into one payload."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

NO_LINES_FOUND = "no lines found for the specified line numbers"


@dataclass
class FileResult:
    """Result of reading one file."""

    success: bool
    text: str | None = None
    error: str | None = None


@dataclass
class RunSummary:
    """Outputs and counts for a whole batch of files."""

    outputs: list[str] = field(default_factory=list)
    succeeded: int = 0
    failed: int = 0

    @property
    def payload(self) -> str:
        """Successful outputs separated by a blank line."""
        return "\n\n".join(self.outputs)

    @property
    def message(self) -> str:
        msg = f"Successfully copied {self.succeeded} file(s) to clipboard"
        if self.failed > 0:
            msg += f" ({self.failed} failed)"
        return msg


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_file(
    file_path: str | Path,
    lines: frozenset[int] | None = None,
    strip: bool = False,
    encoding: str = "utf-8",
) -> FileResult:
    """Read a file and keep the selected lines.

    Args:
        file_path: File to read.
        lines: 1-based line numbers to keep, or None for every line.
        strip: Leave out the ``"<n>. "`` prefix on selected lines.
            Whole-file reads are never numbered.
        encoding: Text encoding; undecodable bytes are replaced.

    Returns:
        FileResult with the kept lines joined by newlines, or an error.
    """
    try:
        f = open(file_path, "r", encoding=encoding, errors="replace", newline="\n")
    except (OSError, LookupError) as e:
        return FileResult(success=False, error=f"failed to open file: {e}")

    kept = []
    with f:
        try:
            for number, raw in enumerate(f, start=1):
                if lines is None:
                    kept.append(_strip_newline(raw))
                elif number in lines:
                    line = _strip_newline(raw)
                    kept.append(line if strip else f"{number}. {line}")
        except OSError as e:
            return FileResult(success=False, error=f"error reading file: {e}")

    if not kept:
        return FileResult(success=False, error=NO_LINES_FOUND)

    return FileResult(success=True, text="\n".join(kept))


def collect(
    paths: Iterable[str | Path],
    lines: frozenset[int] | None = None,
    strip: bool = False,
    encoding: str = "utf-8",
    on_error: Callable[[str | Path, str], None] | None = None,
) -> RunSummary:
    """Read every path in order, skipping the ones that fail.

    ``on_error`` is called with the path and a formatted message for each
    failure.
    """
    summary = RunSummary()
    for path in paths:
        result = read_file(path, lines, strip, encoding)
        if not result.success:
            message = f"Error reading '{path}': {result.error}"
            logger.error(message)
            if on_error is not None:
                on_error(path, message)
            summary.failed += 1
            continue

        summary.outputs.append(result.text)
        summary.succeeded += 1
    return summary
