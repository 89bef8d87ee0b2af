"""Compare file sizes between a reference and a target directory."""

from .errors import DirectoryNotFound, GrowthError, MissingReferenceFile, UnreadableTargetFile
from .report import FileEntry, GrowthReporter

__version__ = "0.1.0"

__all__ = [
    "DirectoryNotFound",
    "FileEntry",
    "GrowthError",
    "GrowthReporter",
    "MissingReferenceFile",
    "UnreadableTargetFile",
    "__version__",
]
