"""Growth report: byte sizes of target files against their reference copies.

The target directory is listed once and every regular file found there is
looked up by name in the reference directory. The reference directory is
never listed on its own.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from .config import get_reference_dir, get_strict, get_target_dir
from .errors import DirectoryNotFound, GrowthError, MissingReferenceFile, UnreadableTargetFile

logger = logging.getLogger(__name__)

HEADER = ("file", "before", "after")
MISSING_SIZE = "-"


@dataclass(frozen=True)
class FileEntry:
    """One row of the growth report. ``None`` marks a size that could not be read."""

    name: str
    before_size: Optional[int]
    after_size: Optional[int]


def measure_size(path: Path) -> int:
    """Return the byte length of the file at ``path``.

    The file is opened for reading, so a file that exists but cannot be
    read raises ``OSError`` just like a missing one.
    """
    with open(path, "rb") as handle:
        return os.fstat(handle.fileno()).st_size


def format_header() -> str:
    return "\t".join(HEADER)


def _format_size(size: Optional[int]) -> str:
    return MISSING_SIZE if size is None else str(size)


def format_row(entry: FileEntry) -> str:
    return f"{entry.name}\t{_format_size(entry.before_size)}\t{_format_size(entry.after_size)}"


class GrowthReporter:
    """Builds the growth report for a reference/target directory pair.

    Directories left as ``None`` are resolved from the environment, see
    :mod:`checkgrowth.config`. In strict mode the first file that cannot be
    measured raises :class:`MissingReferenceFile` (reference side) or
    :class:`UnreadableTargetFile` (target side). Otherwise the row is kept
    with ``-`` for the unknown size and the error is recorded in
    :attr:`warnings`.
    """

    def __init__(
        self,
        reference_dir: Optional[Path] = None,
        target_dir: Optional[Path] = None,
        strict: Optional[bool] = None,
    ) -> None:
        self.reference_dir = Path(reference_dir) if reference_dir is not None else get_reference_dir()
        self.target_dir = Path(target_dir) if target_dir is not None else get_target_dir()
        self.strict = get_strict() if strict is None else strict
        self.warnings: list[GrowthError] = []

    @property
    def missing(self) -> list[str]:
        """Names whose reference file was missing or unreadable in the last run."""
        return [w.name for w in self.warnings if isinstance(w, MissingReferenceFile)]

    def list_names(self) -> list[str]:
        """List the target directory, in listing order, without hidden names."""
        try:
            names = os.listdir(self.target_dir)
        except OSError as e:
            raise DirectoryNotFound(self.target_dir, e.strerror) from e
        logger.debug(f"Listed {len(names)} entries in {self.target_dir}")
        return [name for name in names if not name.startswith(".")]

    def entries(self) -> Iterator[FileEntry]:
        """Yield one :class:`FileEntry` per regular file in the target directory."""
        return self._entries(self.list_names())

    def _measure(self, error_class: type[GrowthError], name: str, path: Path) -> Optional[int]:
        try:
            return measure_size(path)
        except OSError as e:
            error = error_class(name, path, e.strerror)
            if self.strict:
                raise error from e
            logger.debug(str(error))
            self.warnings.append(error)
            return None

    def _entries(self, names: Iterable[str]) -> Iterator[FileEntry]:
        self.warnings = []
        for name in names:
            target_path = self.target_dir / name
            if not target_path.is_file():
                logger.debug(f"Skipping non-file entry: {target_path}")
                continue

            reference_path = self.reference_dir / name
            after_size = self._measure(UnreadableTargetFile, name, target_path)
            before_size = self._measure(MissingReferenceFile, name, reference_path)

            yield FileEntry(name, before_size, after_size)

    def lines(self) -> Iterator[str]:
        """Yield the header followed by one row per entry.

        The target directory is listed before the header is produced, so a
        missing directory yields nothing at all.
        """
        names = self.list_names()
        logger.debug(f"Comparing {self.target_dir} against {self.reference_dir}")
        yield format_header()
        for entry in self._entries(names):
            yield format_row(entry)

    def write(self, echo: Callable[[str], None]) -> list[GrowthError]:
        """Pass every report line to ``echo`` and return the errors reported as ``-``."""
        for line in self.lines():
            echo(line)
        return list(self.warnings)
