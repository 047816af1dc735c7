from pathlib import Path

from cleo.commands.command import Command
from cleo.helpers import argument, option

from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.storage.ScanLibrary import ScanLibrary
from doc_scanner.storage.ScanStorage import ScanStorage


class OpenCommand(Command):
    """
    The open command.
    """
    name = 'open'
    description = 'Shows the URI of a saved scan and optionally opens it with the PDF viewer of the platform'
    options = [option(long_name='launch',
                      description='Open the scan with the PDF viewer of the platform.'),
               option(long_name='storage',
                      short_name='s',
                      description='The path to the app-private storage.',
                      default=str(Path.home() / '.doc-scanner'),
                      flag=False)]
    arguments = [argument(name='scan', description='The name of the scan.')]

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the open command.
        """
        io = DocScannerIO(self._io.input, self._io.output, self._io.error_output)
        library = ScanLibrary(io, ScanStorage(Path(self.option('storage'))))

        if self.option('launch'):
            handle = library.launch(self.argument('scan'))
        else:
            handle = library.view_handle(self.argument('scan'))

        io.text(f'{handle.uri} ({handle.mime_type})')

        return 0

# ----------------------------------------------------------------------------------------------------------------------
