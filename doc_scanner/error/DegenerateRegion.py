from doc_scanner.error.ScanError import ScanError


class DegenerateRegion(ScanError):
    """
    Raised when the selected corners collapse to a region without area.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
