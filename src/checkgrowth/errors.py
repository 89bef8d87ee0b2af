"""Errors raised while building a growth report."""

from __future__ import annotations

from pathlib import Path


class GrowthError(Exception):
    """Base class for check-growth errors."""


class DirectoryNotFound(GrowthError):
    """The target directory is missing or cannot be listed."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        message = f"Cannot list target directory '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MissingReferenceFile(GrowthError):
    """A target file has no readable counterpart in the reference directory."""

    def __init__(self, name: str, path: Path, reason: str | None = None) -> None:
        self.name = name
        self.path = path
        self.reason = reason
        message = f"No reference file for '{name}' (looked for '{path}')"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnreadableTargetFile(GrowthError):
    """A file listed in the target directory could not be measured."""

    def __init__(self, name: str, path: Path, reason: str | None = None) -> None:
        self.name = name
        self.path = path
        self.reason = reason
        message = f"Cannot read target file '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
