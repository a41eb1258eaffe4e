"""Bundled world content."""
