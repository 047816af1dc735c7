from dataclasses import dataclass


@dataclass(frozen=True)
class ViewHandle:
    """
    A handle to a saved scan for a PDF viewer.
    """
    uri: str
    """
    The URI of the document.
    """

    mime_type: str = 'application/pdf'
    """
    The MIME type of the document.
    """

# ----------------------------------------------------------------------------------------------------------------------
