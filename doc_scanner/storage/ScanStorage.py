from pathlib import Path
from typing import List

from doc_scanner.error.IOFailure import IOFailure
from doc_scanner.storage import now_millis
from doc_scanner.storage.ScanDocument import ScanDocument


class ScanStorage:
    """
    The layout of the app-private storage: captured and cropped images in the root, saved scans in the scans folder.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, root: Path):
        """
        Object constructor.

        :param root: The path to the app-private storage.
        """
        self._root: Path = root
        """
        The path to the app-private storage.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def scans_path(self) -> Path:
        """
        Returns the path to the folder with saved scans.
        """
        return self._root / 'scans'

    # ------------------------------------------------------------------------------------------------------------------
    def prepare(self) -> Path:
        """
        Creates the app-private storage if absent and returns its path.
        """
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise IOFailure(f"Unable to create storage '{self._root}': {error}") from error

        return self._root

    # ------------------------------------------------------------------------------------------------------------------
    def crop_path(self) -> Path:
        """
        Returns a new path for a cropped image.
        """
        return self.prepare() / f'cropped_image_{now_millis()}.png'

    # ------------------------------------------------------------------------------------------------------------------
    def list_scans(self) -> List[ScanDocument]:
        """
        Returns all saved scans ordered by name. Subfolders of the scans folder are not searched.
        """
        if not self.scans_path.is_dir():
            return []

        documents = []
        for path in sorted(self.scans_path.iterdir()):
            if path.is_file() and path.suffix == '.pdf':
                documents.append(ScanDocument(name=path.stem, path=path, size=path.stat().st_size))

        return documents

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def discard(path: Path | None) -> None:
        """
        Removes an intermediate image, if it exists.

        :param path: The path to the image.
        """
        if path is not None:
            path.unlink(missing_ok=True)

# ----------------------------------------------------------------------------------------------------------------------
