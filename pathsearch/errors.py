"""
Search failure conditions.
"""

from __future__ import annotations

from typing import Any


class NoPathFound(RuntimeError):
    """
    Raised when the frontier is exhausted before any goal node is confirmed.
    """

    def __init__(self, start: Any, message: str | None = None) -> None:
        if message is None:
            message = f"No path found from {start} to goal"
        super().__init__(message)
        self.start = start
