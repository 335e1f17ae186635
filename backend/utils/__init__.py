"""backend.utils – shared formatting helpers."""
