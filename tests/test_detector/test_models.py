"""Tests for data models."""

import pytest

from localdup.common.exceptions import DetectionError
from localdup.detector.models import (
    DetectionResult,
    DuplicateMatch,
    FileRecord,
    SizeGroup,
)


def test_file_record_creation(sample_file: FileRecord) -> None:
    """Test creating a FileRecord."""
    assert sample_file.path == "/data/photos/test.jpg"
    assert sample_file.size == 1024
    assert sample_file.extension == ".jpg"
    assert sample_file.name == "test.jpg"
    assert sample_file.folder == "/data/photos"


def test_file_record_is_immutable_and_hashable(sample_file: FileRecord) -> None:
    """FileRecords can be used in sets and cannot be modified."""
    copy = FileRecord(path="/data/photos/test.jpg", size=1024, extension=".jpg")

    assert {sample_file, copy} == {sample_file}
    with pytest.raises(AttributeError):
        sample_file.size = 0  # type: ignore[misc]


def test_size_group_rejects_other_sizes() -> None:
    """A size group only accepts files of its own length."""
    group = SizeGroup(size=10)
    group.add(FileRecord(path="/a", size=10))

    with pytest.raises(DetectionError):
        group.add(FileRecord(path="/b", size=11))

    assert group.count == 1
    assert not group.is_candidate


def test_size_group_candidate() -> None:
    """Two files of the same size make a candidate group."""
    group = SizeGroup(size=5)
    group.add(FileRecord(path="/a", size=5))
    group.add(FileRecord(path="/b", size=5))

    assert group.is_candidate


def test_detection_result_totals() -> None:
    """Test DetectionResult count and wasted size calculation."""
    original = FileRecord(path="/a", size=100)
    matches = [
        DuplicateMatch(duplicate=FileRecord(path="/b", size=100), original=original),
        DuplicateMatch(duplicate=FileRecord(path="/c", size=100), original=original),
        DuplicateMatch(
            duplicate=FileRecord(path="/e", size=7),
            original=FileRecord(path="/d", size=7),
        ),
    ]
    result = DetectionResult(matches=matches, files_scanned=6)

    assert result.count == 3
    assert result.wasted_size == 207
    assert result.duplicate_paths == ["/b", "/c", "/e"]
