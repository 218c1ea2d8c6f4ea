"""Multi-pass duplicate detection pipeline."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, Optional

from ..common.constants import DEFAULT_MAX_WORKERS
from ..common.logging import get_logger
from ..config.settings import Settings
from .collector import DuplicateCollector
from .comparator import FileComparator
from .group_pass import GroupPass
from .models import DetectionResult, FileRecord, SizeGroup
from .size_pass import SizePass

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


class DetectionPipeline:
    """Orchestrates multi-pass duplicate detection."""

    def __init__(
        self,
        comparator: Optional[FileComparator] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize detection pipeline.

        Args:
            comparator: Pairwise comparator (defaults to 16 KiB chunks, sha256)
            max_workers: Number of size groups processed in parallel
        """
        if max_workers <= 0:
            raise ValueError("max_workers must be positive")
        self.size_pass = SizePass()
        self.group_pass = GroupPass(comparator or FileComparator())
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: Settings) -> "DetectionPipeline":
        """Build a pipeline from application settings."""
        comparator = FileComparator(
            chunk_size=settings.chunk_size,
            hash_algorithm=settings.hash_algorithm,
        )
        return cls(comparator=comparator, max_workers=settings.max_workers)

    def detect_duplicates(
        self,
        files: Iterable[FileRecord],
        min_size: int = 0,
        progress: Optional[ProgressCallback] = None,
    ) -> DetectionResult:
        """Run duplicate detection pipeline.

        Blocks until every candidate group has been processed. The first
        comparison error cancels the groups not yet started and is re-raised.

        Args:
            files: File records to analyze
            min_size: Minimum file size to consider
            progress: Called with (completed_groups, total_groups)

        Returns:
            Detection result with one match per duplicate file
        """
        logger.info("Starting duplicate detection pipeline")

        # Pass 1: Group by size
        groups = self.size_pass.group_by_size(files)
        candidates = self.size_pass.find_candidates(groups, min_size)
        result = DetectionResult(
            matches=[],
            files_scanned=sum(g.count for g in groups.values()),
            size_groups=len(groups),
            candidate_groups=len(candidates),
        )

        if not candidates:
            logger.info("No duplicate candidates found")
            return result

        # Passes 2 and 3 run per group on the worker pool
        collector = DuplicateCollector()
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="localdup-group"
        ) as executor:
            futures = [
                executor.submit(self._process_group, group, collector)
                for group in candidates
            ]
            try:
                for completed, future in enumerate(as_completed(futures), start=1):
                    future.result()
                    if progress:
                        progress(completed, len(futures))
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

        result.matches = collector.drain()
        logger.info(f"Detection complete: {result.count} duplicate files found")
        return result

    def _process_group(self, group: SizeGroup, collector: DuplicateCollector) -> None:
        for match in self.group_pass.find_duplicates(group):
            collector.add(match)
