"""Bundled data files (default theme and manifest)."""
