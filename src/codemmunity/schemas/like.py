# src/codemmunity/schemas/like.py
"""Like-related schemas."""

from enum import Enum


class LikeMode(str, Enum):
    """Direction of a like adjustment; the value is what clients send."""

    INCREMENT = "Increment"
    DECREMENT = "Decrement"

    @property
    def delta(self) -> int:
        """Return the signed change this mode applies to a like count."""
        return 1 if self is LikeMode.INCREMENT else -1
