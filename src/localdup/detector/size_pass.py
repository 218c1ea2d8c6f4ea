"""Pass 1: Group files by size."""

from typing import Iterable

from ..common.logging import get_logger
from .models import FileRecord, SizeGroup

logger = get_logger(__name__)


class SizePass:
    """First pass: partition files by exact byte length."""

    def group_by_size(self, files: Iterable[FileRecord]) -> dict[int, SizeGroup]:
        """Partition files into size groups.

        Singleton groups are kept in the partition; callers decide what to
        dispatch via find_candidates.

        Args:
            files: File records from the enumerator

        Returns:
            Dictionary mapping byte length to its size group
        """
        groups: dict[int, SizeGroup] = {}
        total_files = 0

        for file in files:
            group = groups.get(file.size)
            if group is None:
                group = groups[file.size] = SizeGroup(size=file.size)
            group.add(file)
            total_files += 1

        logger.info(f"Pass 1: {total_files} files in {len(groups)} size groups")
        return groups

    def find_candidates(
        self, groups: dict[int, SizeGroup], min_size: int = 0
    ) -> list[SizeGroup]:
        """Select the groups that can contain duplicates.

        Args:
            groups: Partition produced by group_by_size
            min_size: Minimum file size in bytes to consider

        Returns:
            Groups with two or more files, largest size first
        """
        candidates = [
            group
            for size, group in groups.items()
            if group.is_candidate and size >= min_size
        ]
        candidates.sort(key=lambda g: g.size, reverse=True)

        if candidates:
            total_files = sum(g.count for g in candidates)
            logger.info(
                f"Found {total_files} candidate files in {len(candidates)} size groups "
                f"(avg {total_files / len(candidates):.1f} files/group)"
            )
        else:
            logger.info("No size group has more than one file")

        return candidates
