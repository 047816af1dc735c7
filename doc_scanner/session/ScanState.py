from enum import auto, Enum, STRICT


class ScanState(Enum, boundary=STRICT):
    """
    Enumeration for the states of a scan session.
    """
    # ------------------------------------------------------------------------------------------------------------------
    IDLE = auto()
    """
    Nothing captured yet.
    """

    CAPTURING = auto()
    """
    Waiting for the camera.
    """

    CAPTURED = auto()
    """
    An image has been captured, the corners are at their default positions.
    """

    ADJUSTING = auto()
    """
    The user is adjusting the corners.
    """

    CROPPED = auto()
    """
    The image has been cropped.
    """

    EXPORTING = auto()
    """
    The cropped image is being exported as PDF.
    """

    DONE = auto()
    """
    The PDF has been saved.
    """

    ERROR = auto()
    """
    The last action failed.
    """

# ----------------------------------------------------------------------------------------------------------------------
