"""Bundled data files for confctl."""
