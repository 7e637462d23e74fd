"""Snapshot-based, revert-style undo history for ed-like editors."""

__version__ = "0.14.0"
__all__ = ["history"]