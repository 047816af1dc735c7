from cleo.application import Application
from cleo.io.io import IO
from cleo.io.outputs.output import Verbosity

from doc_scanner.command.DeleteCommand import DeleteCommand
from doc_scanner.command.OpenCommand import OpenCommand
from doc_scanner.command.ScanCommand import ScanCommand
from doc_scanner.command.ScansCommand import ScansCommand
from doc_scanner.io.DocScannerIO import DocScannerIO


class DocScannerApplication(Application):
    """
    The DocScanner application.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self):
        """
        Object constructor
        """
        Application.__init__(self, 'doc-scanner', '1.0.0')

        self.add(DeleteCommand())
        self.add(OpenCommand())
        self.add(ScanCommand())
        self.add(ScansCommand())

    # ------------------------------------------------------------------------------------------------------------------
    def render_error(self, error: Exception, io: IO) -> None:
        if io.output.verbosity == Verbosity.NORMAL:
            my_io = DocScannerIO(io.input, io.output, io.error_output)
            lines = [error.__class__.__name__, str(error)]
            my_io.error(lines)
        else:
            Application.render_error(self, error, io)

# ----------------------------------------------------------------------------------------------------------------------
