import abc
from pathlib import Path


class Camera(abc.ABC):
    """
    The camera collaborator of a scan session.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @abc.abstractmethod
    def capture(self, directory: Path) -> Path:
        """
        Captures an image, saves it in a directory, and returns the path to the saved image. Raises CaptureFailure when
        the camera fails.

        :param directory: The directory where the image must be saved.
        """
        raise NotImplementedError()

# ----------------------------------------------------------------------------------------------------------------------
