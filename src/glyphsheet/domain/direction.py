"""Text flow direction for strings rendered with a bitmap font."""

from enum import IntEnum


class Direction(IntEnum):
    """Direction in which strings should be rendered.

    Persisted as its integer ordinal. LEFT_TO_RIGHT is the zero value.
    """

    LEFT_TO_RIGHT = 0  # e.g. Latin
    RIGHT_TO_LEFT = 1  # e.g. Arabic
    TOP_TO_BOTTOM = 2  # e.g. Chinese

    @classmethod
    def from_ordinal(cls, value: object) -> "Direction":
        """Look up a direction by its persisted ordinal.

        Args:
            value: Integer ordinal read from a document

        Returns:
            Matching Direction member

        Raises:
            ValueError: If value is not an int or is out of range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Direction ordinal must be an integer, got {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown direction ordinal {value} (expected 0, 1 or 2)"
            ) from None

    @property
    def is_horizontal(self) -> bool:
        """True for left-to-right and right-to-left text."""
        return self is not Direction.TOP_TO_BOTTOM
