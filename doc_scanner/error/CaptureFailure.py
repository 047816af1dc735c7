from doc_scanner.error.ScanError import ScanError


class CaptureFailure(ScanError):
    """
    Raised when the camera fails to capture an image.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
