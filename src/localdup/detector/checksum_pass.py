"""Pass 3: Full-content digest confirmation."""

import hashlib
from typing import BinaryIO

from ..common.constants import DEFAULT_HASH_ALGORITHM, HASH_BLOCK_SIZE
from ..common.logging import get_logger

logger = get_logger(__name__)


class ChecksumPass:
    """Third pass: confirm duplicates by hashing their whole content."""

    def __init__(self, algorithm: str = DEFAULT_HASH_ALGORITHM) -> None:
        """Initialize checksum pass.

        Args:
            algorithm: Any hashlib algorithm name
        """
        hashlib.new(algorithm)
        self.algorithm = algorithm

    def digest(self, handle: BinaryIO) -> bytes:
        """Hash the full content of an open file.

        Args:
            handle: File opened in binary mode; read from the beginning

        Returns:
            Raw digest bytes
        """
        hasher = hashlib.new(self.algorithm)
        handle.seek(0)
        for block in iter(lambda: handle.read(HASH_BLOCK_SIZE), b""):
            hasher.update(block)
        return hasher.digest()

    def matches(self, file_a: BinaryIO, file_b: BinaryIO) -> bool:
        """Check whether two open files have the same content digest."""
        digest_a = self.digest(file_a)
        digest_b = self.digest(file_b)
        logger.debug(
            f"{self.algorithm} {digest_a.hex()} {file_a.name} / "
            f"{digest_b.hex()} {file_b.name}"
        )
        return digest_a == digest_b
