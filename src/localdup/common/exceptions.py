"""Custom exception hierarchy."""


class LocalDupError(Exception):
    """Base exception for all localdup errors."""


class ConfigError(LocalDupError):
    """Configuration error (bad root path, invalid settings)."""


class ScanError(LocalDupError):
    """Error enumerating the root location."""


class ComparisonError(LocalDupError):
    """A file could not be read while comparing contents."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class DetectionError(LocalDupError):
    """Internal invariant of duplicate detection was violated."""


class ExportError(LocalDupError):
    """Error writing an exported report."""
