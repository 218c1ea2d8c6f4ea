"""Duplicate detection passes and pipeline."""
