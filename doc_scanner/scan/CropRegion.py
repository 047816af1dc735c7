from dataclasses import dataclass


@dataclass(frozen=True)
class CropRegion:
    """
    An axis-aligned region in image space. The right and bottom edges are exclusive.
    """
    left: int
    """
    The x-coordinate of the left edge.
    """

    top: int
    """
    The y-coordinate of the top edge.
    """

    right: int
    """
    The x-coordinate of the right edge.
    """

    bottom: int
    """
    The y-coordinate of the bottom edge.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.right - self.left

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def height(self) -> int:
        return self.bottom - self.top

# ----------------------------------------------------------------------------------------------------------------------
