from dataclasses import dataclass
from typing import Iterator, Tuple

from doc_scanner.scan.Point import Point


@dataclass(frozen=True)
class CornerSet:
    """
    The four user adjustable corners of the crop region in display space. Corner i is connected to corner (i + 1) mod 4.
    """
    points: Tuple[Point, Point, Point, Point]
    """
    The corners.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __post_init__(self):
        if len(self.points) != 4:
            raise ValueError(f'A corner set requires exactly 4 points, got {len(self.points)}.')

    # ------------------------------------------------------------------------------------------------------------------
    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    # ------------------------------------------------------------------------------------------------------------------
    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    # ------------------------------------------------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.points)

    # ------------------------------------------------------------------------------------------------------------------
    def replace(self, index: int, point: Point) -> 'CornerSet':
        """
        Returns a copy of this corner set with one corner replaced.

        :param index: The index of the corner.
        :param point: The new position of the corner.
        """
        points = list(self.points)
        points[index] = point

        return CornerSet(tuple(points))

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def centered_square(viewport_width: float, viewport_height: float, box_size: float) -> 'CornerSet':
        """
        Returns a square of corners centered in the viewport, clockwise starting at the left top corner.

        :param viewport_width: The width of the viewport.
        :param viewport_height: The height of the viewport.
        :param box_size: The length of the sides of the square.
        """
        left = (viewport_width - box_size) / 2
        top = (viewport_height - box_size) / 2

        return CornerSet((Point(left, top),
                          Point(left + box_size, top),
                          Point(left + box_size, top + box_size),
                          Point(left, top + box_size)))

# ----------------------------------------------------------------------------------------------------------------------
