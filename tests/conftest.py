"""Shared pytest fixtures."""

from pathlib import Path
from typing import Callable, Iterator

import pytest

from localdup.config.settings import reset_settings
from localdup.detector.models import FileRecord

WriteFile = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep settings free of the caller's environment and .env files."""
    for name in (
        "LOCALDUP_CHUNK_SIZE",
        "LOCALDUP_MAX_WORKERS",
        "LOCALDUP_HASH_ALGORITHM",
        "LOCALDUP_MIN_FILE_SIZE",
        "LOCALDUP_LOG_LEVEL",
        "LOCALDUP_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def scan_dir(tmp_path: Path) -> Path:
    """Create an empty directory to scan."""
    directory = tmp_path / "scan"
    directory.mkdir()
    return directory


@pytest.fixture
def write_file(scan_dir: Path) -> WriteFile:
    """Write a file under the scan directory and return its path."""

    def _write(name: str, content: bytes | str) -> Path:
        path = scan_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode()
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def record_for() -> Callable[[Path], FileRecord]:
    """Build a FileRecord for an existing file."""

    def _record(path: Path) -> FileRecord:
        return FileRecord(
            path=str(path.resolve()),
            size=path.stat().st_size,
            extension=path.suffix.lower(),
        )

    return _record


@pytest.fixture
def sample_file() -> FileRecord:
    """Create a sample file record."""
    return FileRecord(path="/data/photos/test.jpg", size=1024, extension=".jpg")
