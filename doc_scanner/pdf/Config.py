from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """
    The configuration for exporting PDF documents.
    """
    quality: int = 100
    """
    The quality of the image when saved in the PDF. At 100 the image is embedded lossless, otherwise as JPEG with this
    quality.
    """

# ----------------------------------------------------------------------------------------------------------------------
