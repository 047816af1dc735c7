from typing import Iterable

from doc_scanner.scan.CornerSet import CornerSet
from doc_scanner.scan.DragEvent import DragEvent
from doc_scanner.scan.DragEventKind import DragEventKind
from doc_scanner.scan.Point import Point


class CornerDragger:
    """
    Applies drag gestures to corner handles.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, radius: float):
        """
        Object constructor.

        :param radius: The radius around a corner handle in which the start of a drag selects that handle.
        """
        self._radius: float = radius
        """
        The radius around a corner handle in which the start of a drag selects that handle.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def select(self, corners: CornerSet, position: Point) -> int | None:
        """
        Returns the index of the corner nearest to a position within the selection radius. Returns None when no corner
        is within the radius.

        :param corners: The corners.
        :param position: The position where the drag starts.
        """
        candidates = [(corner.distance(position), index)
                      for index, corner in enumerate(corners)
                      if corner.distance(position) < self._radius]
        if not candidates:
            return None

        return min(candidates)[1]

    # ------------------------------------------------------------------------------------------------------------------
    def apply(self, corners: CornerSet, events: Iterable[DragEvent]) -> CornerSet:
        """
        Returns the corners after applying a stream of drag events. Moves of a drag that did not select a corner are
        ignored.

        :param corners: The current corners.
        :param events: The drag events.
        """
        selected = None
        for event in events:
            if event.kind == DragEventKind.START:
                selected = self.select(corners, Point(event.x, event.y))
            elif event.kind == DragEventKind.MOVE:
                if selected is not None:
                    corners = corners.replace(selected, corners[selected].translate(event.x, event.y))
            else:
                selected = None

        return corners

# ----------------------------------------------------------------------------------------------------------------------
