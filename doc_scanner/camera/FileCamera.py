import shutil
from pathlib import Path

from doc_scanner.camera.Camera import Camera
from doc_scanner.error.CaptureFailure import CaptureFailure
from doc_scanner.storage import now_millis


class FileCamera(Camera):
    """
    A camera that captures a photo taken earlier, i.e. an existing image file.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, source: Path):
        """
        Object constructor.

        :param source: The path to the photo.
        """
        self._source: Path = source
        """
        The path to the photo.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def capture(self, directory: Path) -> Path:
        suffix = self._source.suffix.lower() or '.jpg'
        path = directory / f'document_{now_millis()}{suffix}'
        try:
            shutil.copyfile(self._source, path)
        except OSError as error:
            raise CaptureFailure(f"Unable to capture '{self._source}': {error}") from error

        return path

# ----------------------------------------------------------------------------------------------------------------------
