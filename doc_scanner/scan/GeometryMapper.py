from typing import List

from doc_scanner.error.InvalidGeometry import InvalidGeometry
from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.scan.Config import Config
from doc_scanner.scan.CornerSet import CornerSet
from doc_scanner.scan.DisplayGeometry import DisplayGeometry
from doc_scanner.scan.Point import Point


class GeometryMapper:
    """
    Class for mapping corners in display space to points in image space.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: DocScannerIO, config: Config):
        """
        Object constructor.

        :param io: The Output decorator.
        :param config: The configuration.
        """
        self._io: DocScannerIO = io
        """
        The Output decorator.
        """

        self._config: Config = config
        """
        The configuration.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def display_geometry(image_width: float,
                         image_height: float,
                         viewport_width: float,
                         viewport_height: float) -> DisplayGeometry:
        """
        Returns how an image is fitted in a viewport. The image fills one axis of the viewport exactly and is padded
        symmetrically along the other axis.

        :param image_width: The width of the image.
        :param image_height: The height of the image.
        :param viewport_width: The width of the viewport.
        :param viewport_height: The height of the viewport.
        """
        if image_width <= 0 or image_height <= 0:
            raise InvalidGeometry(f'Invalid image size {image_width}x{image_height}.')
        if viewport_width <= 0 or viewport_height <= 0:
            raise InvalidGeometry(f'Invalid viewport size {viewport_width}x{viewport_height}.')

        image_aspect = image_width / image_height
        viewport_aspect = viewport_width / viewport_height

        if image_aspect > viewport_aspect:
            displayed_width = viewport_width
            displayed_height = viewport_width / image_aspect
            geometry = DisplayGeometry(displayed_width=displayed_width,
                                       displayed_height=displayed_height,
                                       horizontal_padding=0.0,
                                       vertical_padding=(viewport_height - displayed_height) / 2)
        else:
            displayed_height = viewport_height
            displayed_width = viewport_height * image_aspect
            geometry = DisplayGeometry(displayed_width=displayed_width,
                                       displayed_height=displayed_height,
                                       horizontal_padding=(viewport_width - displayed_width) / 2,
                                       vertical_padding=0.0)

        if geometry.displayed_width <= 0.0 or geometry.displayed_height <= 0.0:
            raise InvalidGeometry(f'Image {image_width}x{image_height} collapses in viewport '
                                  f'{viewport_width}x{viewport_height}.')

        return geometry

    # ------------------------------------------------------------------------------------------------------------------
    def map_corners(self,
                    corners: CornerSet,
                    image_width: int,
                    image_height: int,
                    viewport_width: float,
                    viewport_height: float) -> List[Point]:
        """
        Maps corners in display space to points in image space, clamped to the bounds of the image.

        :param corners: The corners in display space.
        :param image_width: The width of the image.
        :param image_height: The height of the image.
        :param viewport_width: The width of the viewport.
        :param viewport_height: The height of the viewport.
        """
        geometry = self.display_geometry(image_width, image_height, viewport_width, viewport_height)
        self._io.log_verbose(f'Displayed image: {geometry.displayed_width:.1f}x{geometry.displayed_height:.1f}, '
                             f'padding: ({geometry.horizontal_padding:.1f}, {geometry.vertical_padding:.1f}).')

        scale_x = image_width / geometry.displayed_width
        scale_y = image_height / geometry.displayed_height

        points = []
        for corner in corners:
            x = (corner.x - geometry.horizontal_padding + self._config.fine_tune_x) * scale_x
            y = (corner.y - geometry.vertical_padding + self._config.fine_tune_y) * scale_y
            points.append(Point(min(max(x, 0.0), float(image_width)),
                                min(max(y, 0.0), float(image_height))))

        return points

# ----------------------------------------------------------------------------------------------------------------------
