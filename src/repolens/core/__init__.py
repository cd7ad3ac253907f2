"""Data types, the adjacency index and file tree helpers."""
