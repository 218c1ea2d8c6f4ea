"""File system enumeration."""
