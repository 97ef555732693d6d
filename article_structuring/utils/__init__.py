"""URL and citation helpers."""
