from typing import Iterable

from cleo.formatters.style import Style
from cleo.io.inputs.input import Input
from cleo.io.io import IO
from cleo.io.outputs.output import Output, Verbosity


class DocScannerIO(IO):
    """
    The Output decorator of DocScanner.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, input: Input, output: Output, error_output: Output):
        """
        Object constructor.

        :param input: The input interface.
        :param output: The output interface.
        :param error_output: The error output interface.
        """
        IO.__init__(self, input, output, error_output)

        for formatter in (self.output.formatter, self.error_output.formatter):
            formatter.set_style('fso', Style('green', None, ['bold']))
            formatter.set_style('title', Style('yellow', None, ['bold']))
            formatter.set_style('notice', Style('yellow'))

    # ------------------------------------------------------------------------------------------------------------------
    def title(self, message: str) -> None:
        """
        Writes a title.

        :param message: The title.
        """
        self.write_line([f'<title>{message}</title>', f'<title>{"=" * len(message)}</title>', ''])

    # ------------------------------------------------------------------------------------------------------------------
    def text(self, messages: str | Iterable[str]) -> None:
        """
        Writes informational text.

        :param messages: The message or messages.
        """
        self.write_line(messages)

    # ------------------------------------------------------------------------------------------------------------------
    def log_notice(self, message: str) -> None:
        """
        Logs a message at normal verbosity.

        :param message: The message.
        """
        self.write_line(f'<notice>{message}</notice>')

    # ------------------------------------------------------------------------------------------------------------------
    def log_verbose(self, message: str) -> None:
        """
        Logs a message only when verbose output is enabled.

        :param message: The message.
        """
        self.write_line(message, Verbosity.VERBOSE)

    # ------------------------------------------------------------------------------------------------------------------
    def log_very_verbose(self, message: str) -> None:
        """
        Logs a message only when very verbose output is enabled.

        :param message: The message.
        """
        self.write_line(message, Verbosity.VERY_VERBOSE)

    # ------------------------------------------------------------------------------------------------------------------
    def error(self, messages: str | Iterable[str]) -> None:
        """
        Writes an error block on the error output.

        :param messages: The message or messages.
        """
        lines = [messages] if isinstance(messages, str) else list(messages)
        width = max(len(line) for line in lines) + 4

        self.write_error_line('')
        self.write_error_line(f'<error>{" " * width}</error>')
        for line in lines:
            self.write_error_line(f'<error>  {line.ljust(width - 2)}</error>')
        self.write_error_line(f'<error>{" " * width}</error>')
        self.write_error_line('')

# ----------------------------------------------------------------------------------------------------------------------
