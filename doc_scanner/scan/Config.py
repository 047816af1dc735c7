from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """
    The configuration of a scan session.
    """
    viewport_width: float = 1080.0
    """
    The width of the viewport on which the captured image is displayed.
    """

    viewport_height: float = 1920.0
    """
    The height of the viewport on which the captured image is displayed.
    """

    fine_tune_x: float = 35.0
    """
    The calibration offset along the x-axis added to display coordinates before scaling to image coordinates. Depends
    on the density of the display.
    """

    fine_tune_y: float = 30.0
    """
    The calibration offset along the y-axis added to display coordinates before scaling to image coordinates. Depends
    on the density of the display.
    """

    handle_radius: float = 50.0
    """
    The radius around a corner handle in which a drag gesture selects that handle.
    """

    corner_box_fraction: float = 0.375
    """
    The size of the initial square of corner handles as a fraction of the smallest side of the viewport.
    """

    storage_path: Path = Path('.doc-scanner')
    """
    The path to the app-private storage.
    """

# ----------------------------------------------------------------------------------------------------------------------
