"""Find duplicate files in a local directory tree by content."""

__version__ = "0.1.0"
