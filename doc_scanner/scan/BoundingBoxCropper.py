import math
from typing import List, Tuple

from doc_scanner.error.DegenerateRegion import DegenerateRegion
from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.scan.CropRegion import CropRegion
from doc_scanner.scan.Image import Image
from doc_scanner.scan.Point import Point


class BoundingBoxCropper:
    """
    Class for cropping an image to the bounding box of a set of points. No perspective correction is applied, pixels
    inside the bounding box but outside the quadrilateral are kept.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: DocScannerIO):
        """
        Object constructor.

        :param io: The Output decorator.
        """
        self._io: DocScannerIO = io
        """
        The Output decorator.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def region(points: List[Point], width: int, height: int) -> CropRegion:
        """
        Returns the bounding box of points in image space clamped to the bounds of the image.

        :param points: The points in image space.
        :param width: The width of the image.
        :param height: The height of the image.
        """
        xs = [point.x for point in points]
        ys = [point.y for point in points]

        left = max(0, math.floor(min(xs)))
        top = max(0, math.floor(min(ys)))
        right = min(width, math.ceil(max(xs)))
        bottom = min(height, math.ceil(max(ys)))

        if max(xs) - min(xs) <= 0.0 or right - left <= 0:
            raise DegenerateRegion(f'The selected region has no width (x from {min(xs):.1f} to {max(xs):.1f}).')
        if max(ys) - min(ys) <= 0.0 or bottom - top <= 0:
            raise DegenerateRegion(f'The selected region has no height (y from {min(ys):.1f} to {max(ys):.1f}).')

        return CropRegion(left=left,
                          top=top,
                          right=left + max(1, right - left),
                          bottom=top + max(1, bottom - top))

    # ------------------------------------------------------------------------------------------------------------------
    def crop(self, image: Image, points: List[Point]) -> Tuple[CropRegion, Image]:
        """
        Crops an image to the bounding box of points in image space.

        :param image: The image.
        :param points: The points in image space.
        """
        region = self.region(points, image.width, image.height)
        self._io.log_verbose(f'Crop region: ({region.left}, {region.top}) - ({region.right}, {region.bottom}), '
                             f'size: {region.width}x{region.height}.')

        return region, image.sub_image(region.left, region.top, region.width, region.height)

# ----------------------------------------------------------------------------------------------------------------------
