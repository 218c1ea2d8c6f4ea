"""Report export."""
