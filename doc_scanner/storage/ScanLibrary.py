import os
import subprocess
import sys
from typing import List

from doc_scanner.error.IOFailure import IOFailure
from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.storage.ScanDocument import ScanDocument
from doc_scanner.storage.ScanStorage import ScanStorage
from doc_scanner.storage.ViewHandle import ViewHandle


class ScanLibrary:
    """
    The listing of saved scans with operations for viewing and deleting scans.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: DocScannerIO, storage: ScanStorage):
        """
        Object constructor.

        :param io: The Output decorator.
        :param storage: The app-private storage.
        """
        self._io: DocScannerIO = io
        """
        The Output decorator.
        """

        self._storage: ScanStorage = storage
        """
        The app-private storage.
        """

        self._documents: List[ScanDocument] = storage.list_scans()
        """
        The saved scans.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def documents(self) -> List[ScanDocument]:
        return list(self._documents)

    # ------------------------------------------------------------------------------------------------------------------
    def refresh(self) -> None:
        """
        Reloads the saved scans from the scans folder.
        """
        self._documents = self._storage.list_scans()

    # ------------------------------------------------------------------------------------------------------------------
    def find(self, name: str) -> ScanDocument:
        """
        Returns a saved scan given its name.

        :param name: The name of the scan, with or without the .pdf extension.
        """
        if name.lower().endswith('.pdf'):
            name = name[:-4]

        for document in self._documents:
            if document.name == name:
                return document

        raise IOFailure(f"Scan '{name}' not found in {self._storage.scans_path}.")

    # ------------------------------------------------------------------------------------------------------------------
    def delete(self, name: str) -> ScanDocument:
        """
        Deletes a saved scan from the scans folder and from this listing.

        :param name: The name of the scan.
        """
        document = self.find(name)
        try:
            document.path.unlink(missing_ok=True)
        except OSError as error:
            raise IOFailure(f"Unable to delete '{document.path}': {error}") from error

        self._documents.remove(document)
        self._io.text(f'File deleted: <fso>{document.path.name}</fso>.')

        return document

    # ------------------------------------------------------------------------------------------------------------------
    def view_handle(self, name: str) -> ViewHandle:
        """
        Returns a handle for viewing a saved scan.

        :param name: The name of the scan.
        """
        document = self.find(name)

        return ViewHandle(uri=document.path.resolve().as_uri())

    # ------------------------------------------------------------------------------------------------------------------
    def launch(self, name: str) -> ViewHandle:
        """
        Opens a saved scan with the PDF viewer of the platform.

        :param name: The name of the scan.
        """
        handle = self.view_handle(name)
        path = self.find(name).path

        try:
            if sys.platform == 'win32':
                os.startfile(path)
            elif sys.platform == 'darwin':
                subprocess.run(['open', str(path)], check=True)
            else:
                subprocess.run(['xdg-open', str(path)], check=True)
        except (OSError, subprocess.CalledProcessError) as error:
            raise IOFailure(f'No application available to open PDF: {error}') from error

        self._io.log_verbose(f'Opened <fso>{path}</fso> as {handle.mime_type}.')

        return handle

# ----------------------------------------------------------------------------------------------------------------------
