class ScanError(RuntimeError):
    """
    Exception class for errors while scanning, cropping, and exporting documents.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
