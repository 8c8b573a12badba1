"""Snapshot-test scaffolding for UI component source files."""

__version__ = "0.1.0"
