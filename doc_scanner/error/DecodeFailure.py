from doc_scanner.error.ScanError import ScanError


class DecodeFailure(ScanError):
    """
    Raised when a captured image can not be decoded.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
