from dataclasses import dataclass

from doc_scanner.scan.DragEventKind import DragEventKind


@dataclass(frozen=True)
class DragEvent:
    """
    An event of a drag gesture in display space.
    """
    kind: DragEventKind
    """
    The kind of event.
    """

    x: float = 0.0
    """
    The x-coordinate of the start position, or the delta along the x-axis of a move.
    """

    y: float = 0.0
    """
    The y-coordinate of the start position, or the delta along the y-axis of a move.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def start(x: float, y: float) -> 'DragEvent':
        return DragEvent(DragEventKind.START, x, y)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def move(dx: float, dy: float) -> 'DragEvent':
        return DragEvent(DragEventKind.MOVE, dx, dy)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def end() -> 'DragEvent':
        return DragEvent(DragEventKind.END)

# ----------------------------------------------------------------------------------------------------------------------
