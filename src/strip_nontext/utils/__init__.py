"""Internal helpers for strip_nontext."""
