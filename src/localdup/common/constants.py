"""Constants used throughout the application."""

# Boundary chunk read from the start and end of each file
DEFAULT_CHUNK_SIZE = 16 * 1024

# Streaming block size for full-content digests
HASH_BLOCK_SIZE = 1024 * 1024

# Worker pool
DEFAULT_MAX_WORKERS = 10

DEFAULT_HASH_ALGORITHM = "sha256"
MIN_DIGEST_BITS = 128

# Windows file attribute bits (stat.FILE_ATTRIBUTE_*) excluded from scans
FILE_ATTRIBUTE_HIDDEN = 0x2
FILE_ATTRIBUTE_SYSTEM = 0x4
FILE_ATTRIBUTE_TEMPORARY = 0x100
SKIPPED_ATTRIBUTES = (
    FILE_ATTRIBUTE_HIDDEN | FILE_ATTRIBUTE_SYSTEM | FILE_ATTRIBUTE_TEMPORARY
)

# Extension shortcut flags offered by the CLI
SHORTCUT_EXTENSIONS = {
    "jpg": ".jpg",
    "png": ".png",
    "gif": ".gif",
}
