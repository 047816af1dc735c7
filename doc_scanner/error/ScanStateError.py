from doc_scanner.error.ScanError import ScanError


class ScanStateError(ScanError):
    """
    Raised when an operation is invoked on a scan session in a state that does not allow it.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
