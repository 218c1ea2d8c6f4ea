"""Local file system enumerator."""

import os
from typing import Iterable, Iterator, Optional

from ..common.constants import SKIPPED_ATTRIBUTES
from ..common.exceptions import ScanError
from ..common.logging import get_logger
from ..detector.models import FileRecord

logger = get_logger(__name__)


def normalize_extensions(extensions: Optional[Iterable[str]]) -> frozenset[str]:
    """Normalize extensions to lower case with a leading dot.

    Args:
        extensions: Extensions such as "jpg" or ".PNG"; only the last suffix
            of a file name is matched, so "tar.gz" never matches but "gz" does

    Returns:
        Set of normalized extensions (empty means no filtering)
    """
    normalized = set()
    for ext in extensions or ():
        ext = ext.strip().lower()
        if not ext:
            continue
        normalized.add(ext if ext.startswith(".") else f".{ext}")
    return frozenset(normalized)


def _is_excluded(entry: os.DirEntry, stat_result: os.stat_result) -> bool:
    """Hidden, system and temporary entries are never scanned."""
    if entry.name.startswith("."):
        return True
    attributes = getattr(stat_result, "st_file_attributes", 0)
    return bool(attributes & SKIPPED_ATTRIBUTES)


class FileEnumerator:
    """Walks a directory and yields file records."""

    def __init__(self) -> None:
        """Initialize file enumerator."""
        self.skipped = 0

    def enumerate(
        self,
        root: str,
        recursive: bool = False,
        extensions: Optional[Iterable[str]] = None,
    ) -> Iterator[FileRecord]:
        """Enumerate regular files under root.

        Inaccessible entries are logged and skipped. Symbolic links are not
        followed.

        Args:
            root: Directory to scan
            recursive: Descend into subdirectories
            extensions: Allow-list of extensions (empty means all files)

        Yields:
            FileRecord instances

        Raises:
            ScanError: If root is not a readable directory
        """
        root = os.path.abspath(root)
        if not os.path.isdir(root):
            raise ScanError(f"Not a directory: {root}")

        allowed = normalize_extensions(extensions)
        self.skipped = 0
        pending = [root]
        files_found = 0

        while pending:
            directory = pending.pop()
            try:
                with os.scandir(directory) as it:
                    entries = sorted(it, key=lambda e: e.name)
            except OSError as e:
                if directory == root:
                    raise ScanError(f"Cannot read {root}: {e.strerror or e}") from e
                self._skip(directory, e)
                continue

            subdirectories = []
            for entry in entries:
                try:
                    if entry.is_symlink():
                        continue
                    stat_result = entry.stat(follow_symlinks=False)
                    if _is_excluded(entry, stat_result):
                        continue

                    if entry.is_dir(follow_symlinks=False):
                        if recursive:
                            subdirectories.append(entry.path)
                        continue
                    if not entry.is_file(follow_symlinks=False):
                        continue
                except OSError as e:
                    self._skip(entry.path, e)
                    continue

                extension = os.path.splitext(entry.name)[1].lower()
                if allowed and extension not in allowed:
                    continue

                files_found += 1
                yield FileRecord(
                    path=os.path.abspath(entry.path),
                    size=stat_result.st_size,
                    extension=extension,
                )

            pending.extend(reversed(subdirectories))

        logger.info(f"Enumerated {files_found} files under {root} ({self.skipped} skipped)")

    def _skip(self, path: str, error: OSError) -> None:
        self.skipped += 1
        logger.warning(f"Skipping inaccessible entry {path}: {error.strerror or error}")
