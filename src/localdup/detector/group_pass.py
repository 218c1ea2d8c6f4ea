"""Duplicate search inside a single size group."""

from ..common.logging import get_logger
from .comparator import FileComparator
from .models import DuplicateMatch, FileRecord, SizeGroup

logger = get_logger(__name__)


class GroupPass:
    """Finds the later-encountered duplicates within one size group."""

    def __init__(self, comparator: FileComparator) -> None:
        """Initialize group pass.

        Args:
            comparator: Pairwise file comparator
        """
        self.comparator = comparator

    def find_duplicates(self, group: SizeGroup) -> list[DuplicateMatch]:
        """Compare group members pairwise in group order.

        Each file still unmatched is compared against every later file that
        is neither a known duplicate nor already used as a source. A file
        flagged as duplicate is never used as a source itself: anything it
        matches was already matched by its original.

        Args:
            group: Size group with two or more files

        Returns:
            One match per duplicate file, paired with the file it copies
        """
        compared: set[FileRecord] = set()
        duplicates: set[FileRecord] = set()
        matches: list[DuplicateMatch] = []

        for index, candidate in enumerate(group.files):
            if candidate in duplicates:
                continue

            for target in group.files[index + 1:]:
                if target in duplicates or target in compared:
                    continue
                if self.comparator.compare(candidate, target):
                    duplicates.add(target)
                    matches.append(DuplicateMatch(duplicate=target, original=candidate))

            compared.add(candidate)

        logger.debug(
            f"Size group {group.size}: {len(matches)} duplicates among {group.count} files"
        )
        return matches
