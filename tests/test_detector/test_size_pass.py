"""Tests for size grouping."""

from localdup.detector.models import FileRecord
from localdup.detector.size_pass import SizePass


def _files(*sizes: int) -> list[FileRecord]:
    return [FileRecord(path=f"/f{i}", size=size) for i, size in enumerate(sizes)]


def test_group_by_size_never_mixes_lengths() -> None:
    """Every file in a group has exactly the group's size."""
    files = _files(10, 20, 10, 30, 20, 10, 0)
    groups = SizePass().group_by_size(files)

    assert set(groups) == {0, 10, 20, 30}
    for size, group in groups.items():
        assert all(f.size == size for f in group.files)
    assert sum(g.count for g in groups.values()) == len(files)


def test_group_by_size_keeps_enumeration_order() -> None:
    """Group members appear in the order they were enumerated."""
    files = _files(5, 6, 5, 5)
    groups = SizePass().group_by_size(files)

    assert [f.path for f in groups[5].files] == ["/f0", "/f2", "/f3"]


def test_group_by_size_empty_input() -> None:
    """No files produce an empty partition."""
    assert SizePass().group_by_size([]) == {}


def test_find_candidates_skips_singletons() -> None:
    """Singleton groups stay in the partition but are never candidates."""
    size_pass = SizePass()
    groups = size_pass.group_by_size(_files(1, 2, 2, 3))
    candidates = size_pass.find_candidates(groups)

    assert 1 in groups and 3 in groups
    assert [g.size for g in candidates] == [2]


def test_find_candidates_min_size() -> None:
    """Groups below the minimum size are ignored."""
    size_pass = SizePass()
    groups = size_pass.group_by_size(_files(0, 0, 50, 50, 100, 100))
    candidates = size_pass.find_candidates(groups, min_size=50)

    assert [g.size for g in candidates] == [100, 50]
