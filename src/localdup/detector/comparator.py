"""Pairwise content comparison of two equal-size files."""

from ..common.constants import DEFAULT_CHUNK_SIZE, DEFAULT_HASH_ALGORITHM
from ..common.exceptions import ComparisonError, DetectionError
from ..common.logging import get_logger
from .byte_pass import BoundaryResult, BytePass
from .checksum_pass import ChecksumPass
from .models import FileRecord

logger = get_logger(__name__)


class FileComparator:
    """Decides whether two files of the same size are byte-identical."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
    ) -> None:
        """Initialize comparator.

        Args:
            chunk_size: Boundary chunk size for the byte pass
            hash_algorithm: hashlib algorithm for the checksum pass
        """
        self.byte_pass = BytePass(chunk_size)
        self.checksum_pass = ChecksumPass(hash_algorithm)

    def compare(self, file_a: FileRecord, file_b: FileRecord) -> bool:
        """Compare the contents of two files.

        Both files are opened for the duration of this call only.

        Args:
            file_a: First file
            file_b: Second file, same size as the first

        Returns:
            True if the files are duplicates

        Raises:
            DetectionError: If the sizes differ (grouping bug)
            ComparisonError: If either file cannot be read
        """
        if file_a.size != file_b.size:
            raise DetectionError(
                f"Compared files of different sizes: {file_a.path} ({file_a.size}) "
                f"and {file_b.path} ({file_b.size})"
            )

        try:
            with open(file_a.path, "rb") as handle_a, open(file_b.path, "rb") as handle_b:
                boundary = self.byte_pass.compare(handle_a, handle_b, file_a.size)
                if boundary is BoundaryResult.DIFFERENT:
                    logger.debug(f"Boundary mismatch: {file_a.path} / {file_b.path}")
                    return False
                if boundary is BoundaryResult.IDENTICAL:
                    return True
                return self.checksum_pass.matches(handle_a, handle_b)
        except OSError as e:
            raise ComparisonError(e.filename or file_a.path, e.strerror or str(e)) from e
