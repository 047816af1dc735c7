from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayGeometry:
    """
    How an image is fitted in a viewport while preserving its aspect ratio.
    """
    displayed_width: float
    """
    The width of the displayed image in display space.
    """

    displayed_height: float
    """
    The height of the displayed image in display space.
    """

    horizontal_padding: float
    """
    The padding left and right of the displayed image (pillarboxing).
    """

    vertical_padding: float
    """
    The padding above and below the displayed image (letterboxing).
    """

# ----------------------------------------------------------------------------------------------------------------------
