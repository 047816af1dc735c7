from enum import auto, Enum, STRICT


class DragEventKind(Enum, boundary=STRICT):
    """
    Enumeration for the kinds of events of a drag gesture.
    """
    # ------------------------------------------------------------------------------------------------------------------
    START = auto()
    """
    The drag starts at a position.
    """

    MOVE = auto()
    """
    The drag moves by a delta.
    """

    END = auto()
    """
    The drag ends.
    """

# ----------------------------------------------------------------------------------------------------------------------
