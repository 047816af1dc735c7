import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    A point in either display space or image space.
    """
    x: float
    """
    The x-coordinate.
    """

    y: float
    """
    The y-coordinate.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def distance(self, other: 'Point') -> float:
        """
        Returns the Euclidean distance between this point and another point.

        :param other: The other point.
        """
        return math.hypot(self.x - other.x, self.y - other.y)

    # ------------------------------------------------------------------------------------------------------------------
    def translate(self, dx: float, dy: float) -> 'Point':
        """
        Returns a copy of this point translated by a delta.

        :param dx: The delta along the x-axis.
        :param dy: The delta along the y-axis.
        """
        return Point(self.x + dx, self.y + dy)

# ----------------------------------------------------------------------------------------------------------------------
