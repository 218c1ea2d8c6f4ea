"""Pass 2: Boundary-byte comparison."""

from enum import Enum
from typing import BinaryIO

from ..common.constants import DEFAULT_CHUNK_SIZE
from ..common.exceptions import ComparisonError


class BoundaryResult(Enum):
    """Outcome of comparing the boundary chunks of two files."""

    DIFFERENT = "different"
    IDENTICAL = "identical"
    UNDECIDED = "undecided"


class BytePass:
    """Second pass: compare the first and last chunk of two equal-size files.

    Files no larger than one chunk are read whole, so the result is final.
    Larger files whose boundary chunks match are left UNDECIDED for the
    checksum pass.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Initialize byte pass.

        Args:
            chunk_size: Bytes read from each end of the files
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def compare(self, file_a: BinaryIO, file_b: BinaryIO, size: int) -> BoundaryResult:
        """Compare boundary chunks of two open files.

        Args:
            file_a: First file, opened in binary mode
            file_b: Second file, opened in binary mode
            size: Byte length shared by both files

        Returns:
            DIFFERENT, IDENTICAL (whole file compared) or UNDECIDED
        """
        if size <= self.chunk_size:
            if self._read_at(file_a, 0, size) != self._read_at(file_b, 0, size):
                return BoundaryResult.DIFFERENT
            return BoundaryResult.IDENTICAL

        if self._read_at(file_a, 0, self.chunk_size) != self._read_at(
            file_b, 0, self.chunk_size
        ):
            return BoundaryResult.DIFFERENT

        offset = size - self.chunk_size
        if self._read_at(file_a, offset, self.chunk_size) != self._read_at(
            file_b, offset, self.chunk_size
        ):
            return BoundaryResult.DIFFERENT

        return BoundaryResult.UNDECIDED

    @staticmethod
    def _read_at(handle: BinaryIO, offset: int, length: int) -> bytes:
        """Read exactly length bytes starting at offset."""
        handle.seek(offset)
        data = handle.read(length)
        if len(data) != length:
            raise ComparisonError(
                handle.name,
                f"expected {length} bytes at offset {offset}, got {len(data)} "
                "(file changed during scan?)",
            )
        return data
