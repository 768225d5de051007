"""Exceptions raised outside the simulation core."""

from __future__ import annotations


class TerminalError(RuntimeError):
    """Raised when the display or keyboard cannot be acquired for a game."""
