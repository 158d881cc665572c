"""
Engine errors.

Only malformed level data is raised. Invalid moves and operations attempted
on a session that is not ready are reported through result values instead.
"""

from __future__ import annotations

from typing import List, Optional


class LevelDataInvalid(ValueError):
    """
    Raised when level data cannot be loaded (missing or non-rectangular
    initial grid, malformed exploration tree).
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "INVALID_LEVEL",
        problems: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.problems = problems or [message]
