from pathlib import Path
from typing import Any, Tuple

import cv2
import numpy as np

from doc_scanner.error.DecodeFailure import DecodeFailure
from doc_scanner.error.IOFailure import IOFailure


class Image:
    """
    Class for raster images.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, data: np.ndarray):
        """
        Object constructor.

        :param data: The pixels of the image.
        """
        self._data: np.ndarray = data

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def data(self) -> np.ndarray:
        return self._data

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def width(self) -> int:
        """
        Returns the width of this image.
        """
        _, width = self._data.shape[:2]

        return width

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def height(self) -> int:
        """
        Returns the height of this image.
        """
        height, _ = self._data.shape[:2]

        return height

    # ------------------------------------------------------------------------------------------------------------------
    def size(self) -> Tuple[int, int]:
        """
        Returns the size (width and height) of this image.
        """
        height, width = self._data.shape[:2]

        return width, height

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def read(path: Path):
        """
        Reads an image from the given path.

        :param path: The path.
        """
        try:
            data = cv2.imread(str(path))
        except cv2.error as error:
            raise DecodeFailure(f"Unable to decode image '{path}'.") from error

        if data is None:
            raise DecodeFailure(f"Unable to decode image '{path}'.")

        return Image(data)

    # ------------------------------------------------------------------------------------------------------------------
    def write(self, path: Path, params: Any = None) -> None:
        """
        Writes the image to the given path. The format is derived from the extension of the path.

        :param path: The path.
        :param params: Format specific parameters for cv2.imwrite.
        """
        try:
            if params is None:
                success = cv2.imwrite(str(path), self._data)
            else:
                success = cv2.imwrite(str(path), self._data, params)
        except cv2.error as error:
            raise IOFailure(f"Unable to write image '{path}'.") from error

        if not success:
            raise IOFailure(f"Unable to write image '{path}'.")

    # ------------------------------------------------------------------------------------------------------------------
    def sub_image(self, x: int, y: int, width: int, height: int):
        """
        Returns a copy of a rectangular part of this image.

        :param x: The x-coordinate of the left top corner.
        :param y: The y-coordinate of the left top corner.
        :param width: The width of the part.
        :param height: The height of the part.
        """
        return Image(self._data[y:y + height, x:x + width].copy())

# ----------------------------------------------------------------------------------------------------------------------
