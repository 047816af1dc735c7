from doc_scanner.error.ScanError import ScanError


class InvalidGeometry(ScanError):
    """
    Raised when the display geometry of the viewport is degenerate.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
