"""
Sort direction of a header cell.
"""
from enum import Enum
from typing import Any, Optional


class InvalidDirectionError(ValueError):
    """Exception raised for a value that is not a sort direction."""
    pass


class Direction(str, Enum):
    """Sort direction shown by a header cell."""
    ASCENDING = "ascending"
    DESCENDING = "descending"
    NONE = "none"

    @classmethod
    def coerce(cls, value: Any) -> "Direction":
        """
        Convert a Direction, its string value or None into a Direction.

        Raises:
            InvalidDirectionError: For anything else
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidDirectionError(
            f"Direction must be 'ascending', 'descending', 'none' or None, got {value!r}"
        )

    def next_direction(self) -> "Direction":
        """ascending -> descending -> none -> ascending"""
        return _CYCLE[self]

    @property
    def sign(self) -> Optional[int]:
        """Order handed to comparator factories: ascending -1, descending 1, none None."""
        return _SIGNS[self]

    @property
    def broadcast_value(self) -> Optional["Direction"]:
        """None for NONE, the member itself otherwise."""
        return None if self is Direction.NONE else self


_CYCLE = {
    Direction.ASCENDING: Direction.DESCENDING,
    Direction.DESCENDING: Direction.NONE,
    Direction.NONE: Direction.ASCENDING,
}

_SIGNS = {
    Direction.ASCENDING: -1,
    Direction.DESCENDING: 1,
    Direction.NONE: None,
}
