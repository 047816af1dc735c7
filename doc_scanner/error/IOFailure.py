from doc_scanner.error.ScanError import ScanError


class IOFailure(ScanError):
    """
    Raised when an image or PDF document can not be written, read, or removed.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
