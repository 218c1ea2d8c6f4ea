"""Tests for boundary-byte comparison."""

import io

import pytest

from localdup.common.exceptions import ComparisonError
from localdup.detector.byte_pass import BoundaryResult, BytePass


class RecordingBuffer(io.BytesIO):
    """In-memory file that records the reads made on it."""

    name = "memory"

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.reads: list[tuple[int, int]] = []

    def read(self, size: int | None = -1) -> bytes:  # type: ignore[override]
        self.reads.append((self.tell(), size if size is not None else -1))
        return super().read(size)


def test_small_identical_files_are_final() -> None:
    """Files smaller than a chunk are compared whole."""
    byte_pass = BytePass(chunk_size=16)
    result = byte_pass.compare(RecordingBuffer(b"abc"), RecordingBuffer(b"abc"), 3)

    assert result is BoundaryResult.IDENTICAL


def test_small_different_files() -> None:
    """A difference anywhere in a small file is detected."""
    byte_pass = BytePass(chunk_size=16)
    result = byte_pass.compare(RecordingBuffer(b"abc"), RecordingBuffer(b"abd"), 3)

    assert result is BoundaryResult.DIFFERENT


def test_zero_byte_files_are_identical() -> None:
    """Empty files take the whole-file path and match."""
    result = BytePass().compare(RecordingBuffer(b""), RecordingBuffer(b""), 0)

    assert result is BoundaryResult.IDENTICAL


def test_exact_chunk_size_uses_single_read() -> None:
    """A file exactly one chunk long is read once, without a trailing read."""
    data = b"x" * 16
    file_a, file_b = RecordingBuffer(data), RecordingBuffer(data)
    result = BytePass(chunk_size=16).compare(file_a, file_b, 16)

    assert result is BoundaryResult.IDENTICAL
    assert file_a.reads == [(0, 16)]
    assert file_b.reads == [(0, 16)]


def test_head_mismatch_returns_before_tail_read() -> None:
    """A differing first chunk ends the comparison immediately."""
    file_a = RecordingBuffer(b"A" + b"x" * 63)
    file_b = RecordingBuffer(b"B" + b"x" * 63)
    result = BytePass(chunk_size=16).compare(file_a, file_b, 64)

    assert result is BoundaryResult.DIFFERENT
    assert file_a.reads == [(0, 16)]


def test_tail_mismatch_is_detected() -> None:
    """The trailing chunk itself is compared, not the first chunk again."""
    file_a = RecordingBuffer(b"x" * 63 + b"A")
    file_b = RecordingBuffer(b"x" * 63 + b"B")
    result = BytePass(chunk_size=16).compare(file_a, file_b, 64)

    assert result is BoundaryResult.DIFFERENT
    assert file_a.reads == [(0, 16), (48, 16)]


def test_matching_boundaries_are_undecided() -> None:
    """Files differing only in the middle need the checksum pass."""
    file_a = RecordingBuffer(b"x" * 30 + b"A" + b"x" * 33)
    file_b = RecordingBuffer(b"x" * 30 + b"B" + b"x" * 33)
    result = BytePass(chunk_size=16).compare(file_a, file_b, 64)

    assert result is BoundaryResult.UNDECIDED


def test_short_read_raises() -> None:
    """A file shorter than its recorded size is reported, not compared."""
    with pytest.raises(ComparisonError, match="memory"):
        BytePass(chunk_size=16).compare(
            RecordingBuffer(b"x" * 8), RecordingBuffer(b"x" * 10), 10
        )


def test_invalid_chunk_size() -> None:
    """Chunk size must be positive."""
    with pytest.raises(ValueError):
        BytePass(chunk_size=0)
