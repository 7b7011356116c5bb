"""Synthetic GFA graph generator for downstream graph-tool test fixtures."""

__version__ = "0.1.0"
