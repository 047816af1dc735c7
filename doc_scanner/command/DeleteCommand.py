from pathlib import Path

from cleo.commands.command import Command
from cleo.helpers import argument, option

from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.storage.ScanLibrary import ScanLibrary
from doc_scanner.storage.ScanStorage import ScanStorage


class DeleteCommand(Command):
    """
    The delete command.
    """
    name = 'delete'
    description = 'Deletes saved scans'
    options = [option(long_name='storage',
                      short_name='s',
                      description='The path to the app-private storage.',
                      default=str(Path.home() / '.doc-scanner'),
                      flag=False)]
    arguments = [argument(name='scans', description='The names of the scans.', multiple=True)]

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the delete command.
        """
        io = DocScannerIO(self._io.input, self._io.output, self._io.error_output)
        library = ScanLibrary(io, ScanStorage(Path(self.option('storage'))))

        for name in self.argument('scans'):
            library.delete(name)

        return 0

# ----------------------------------------------------------------------------------------------------------------------
