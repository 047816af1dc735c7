from pathlib import Path

from cleo.commands.command import Command
from cleo.helpers import option
from cleo.ui.table import Table

from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.storage.ScanLibrary import ScanLibrary
from doc_scanner.storage.ScanStorage import ScanStorage


class ScansCommand(Command):
    """
    The scans command.
    """
    name = 'scans'
    description = 'Lists the saved scans'
    options = [option(long_name='storage',
                      short_name='s',
                      description='The path to the app-private storage.',
                      default=str(Path.home() / '.doc-scanner'),
                      flag=False)]

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the scans command.
        """
        io = DocScannerIO(self._io.input, self._io.output, self._io.error_output)
        library = ScanLibrary(io, ScanStorage(Path(self.option('storage'))))

        if not library.documents:
            io.text('No scans available')

            return 0

        table = Table(io)
        table.set_headers(['file', 'size'])
        table.set_rows([[document.path.name, f'{document.size // 1024} KB'] for document in library.documents])
        table.render()

        return 0

# ----------------------------------------------------------------------------------------------------------------------
