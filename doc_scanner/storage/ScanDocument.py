from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ScanDocument:
    """
    A saved scan, i.e. a PDF document in the scans folder.
    """
    name: str
    """
    The name of the document without extension.
    """

    path: Path
    """
    The path to the document.
    """

    size: int
    """
    The size of the document in bytes.
    """

# ----------------------------------------------------------------------------------------------------------------------
