"""Data models for files, size groups and duplicate matches."""

import os
from dataclasses import dataclass, field

from ..common.exceptions import DetectionError


@dataclass(frozen=True)
class FileRecord:
    """Represents one file found under the scan root."""

    path: str
    size: int
    extension: str = ""

    @property
    def name(self) -> str:
        """Base name of the file."""
        return os.path.basename(self.path)

    @property
    def folder(self) -> str:
        """Directory containing the file."""
        return os.path.dirname(self.path)


@dataclass
class SizeGroup:
    """Files sharing an exact byte length."""

    size: int
    files: list[FileRecord] = field(default_factory=list)

    def add(self, file: FileRecord) -> None:
        """Append a file to the group.

        Raises:
            DetectionError: If the file length differs from the group key
        """
        if file.size != self.size:
            raise DetectionError(
                f"{file.path} has {file.size} bytes, "
                f"cannot join size group {self.size}"
            )
        self.files.append(file)

    @property
    def count(self) -> int:
        """Number of files in this group."""
        return len(self.files)

    @property
    def is_candidate(self) -> bool:
        """A group can only hold duplicates if it has two or more files."""
        return len(self.files) >= 2


@dataclass(frozen=True)
class DuplicateMatch:
    """A file whose content is identical to an earlier file in its group."""

    duplicate: FileRecord
    original: FileRecord

    @property
    def size(self) -> int:
        """Bytes that would be reclaimed by removing the duplicate."""
        return self.duplicate.size


@dataclass
class DetectionResult:
    """Outcome of one detection run."""

    matches: list[DuplicateMatch]
    files_scanned: int = 0
    size_groups: int = 0
    candidate_groups: int = 0

    @property
    def count(self) -> int:
        """Number of duplicate files found."""
        return len(self.matches)

    @property
    def wasted_size(self) -> int:
        """Bytes occupied by duplicates beyond their originals."""
        return sum(m.size for m in self.matches)

    @property
    def duplicate_paths(self) -> list[str]:
        """Absolute paths of every duplicate file."""
        return [m.duplicate.path for m in self.matches]
