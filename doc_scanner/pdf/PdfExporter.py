import datetime
import os
import tempfile
from io import BytesIO
from pathlib import Path

import cv2
import img2pdf
import pikepdf
from PIL import Image as PilImage

from doc_scanner.error.IOFailure import IOFailure
from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.pdf.Config import Config
from doc_scanner.scan.Image import Image


class PdfExporter:
    """
    Class for exporting an image as a single page PDF document.
    """
    DPI: int = 72
    """
    The resolution at which the image is laid out on the page. At 72 DPI one point on the page equals one pixel.
    """

    MAX_PAGE_SIZE: int = 14400
    """
    The maximum width and height of a page in points.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: DocScannerIO, config: Config):
        """
        Object constructor.

        :param io: The Output decorator.
        :param config: The configuration.
        """
        self._io: DocScannerIO = io
        """
        The Output decorator.
        """

        self._config: Config = config
        """
        The configuration.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def export(self, image: Image, directory: Path, file_name: str) -> Path:
        """
        Exports an image as a single page PDF document and returns the path to the document. The document is written
        under a temporary name and moved into place when complete.

        :param image: The image.
        :param directory: The directory where the document must be saved. Created when absent.
        :param file_name: The name of the document, the extension is forced to .pdf.
        """
        path = directory / f'{self.base_name(file_name)}.pdf'
        self._io.log_verbose(f'Exporting {image.width}x{image.height} image to <fso>{path}</fso>.')

        if max(image.width, image.height) > self.MAX_PAGE_SIZE:
            raise IOFailure(f"Unable to save PDF '{path}': an image of {image.width}x{image.height} pixels exceeds the "
                            f'maximum page size of {self.MAX_PAGE_SIZE} points.')

        try:
            directory.mkdir(parents=True, exist_ok=True)
            data = self._create_pdf(image)
            with pikepdf.open(BytesIO(data)) as pdf:
                self._set_metadata(pdf, path.stem)
                self._save_pdf(pdf, path)
        except (OSError, ValueError, img2pdf.ImageOpenError, pikepdf.PdfError) as error:
            raise IOFailure(f"Unable to save PDF '{path}': {error}") from error

        self._io.text(f'Saved PDF as <fso>{path}</fso>.')

        return path

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def base_name(file_name: str) -> str:
        """
        Returns the name of a document without the .pdf extension.

        :param file_name: The file name given by the user.
        """
        name = file_name.strip()
        if name.lower().endswith('.pdf'):
            name = name[:-4]

        if name in ('', '.', '..') or '/' in name or '\\' in name or '\0' in name:
            raise IOFailure(f"Invalid file name '{file_name}'.")

        return name

    # ------------------------------------------------------------------------------------------------------------------
    def _create_pdf(self, image: Image) -> bytes:
        """
        Returns a PDF with a single page of the same size as the image. Pages smaller than 3 points are allowed.

        :param image: The image.
        """
        PilImage.MAX_IMAGE_PIXELS = max(PilImage.MAX_IMAGE_PIXELS or 0, image.width * image.height)

        with tempfile.TemporaryDirectory(prefix='doc-scanner-') as tmp_path:
            if self._config.quality == 100:
                raster_path = Path(tmp_path) / 'page.png'
                image.write(raster_path, [cv2.IMWRITE_PNG_COMPRESSION, 9])
            else:
                raster_path = Path(tmp_path) / 'page.jpg'
                image.write(raster_path, [cv2.IMWRITE_JPEG_QUALITY, self._config.quality])

            return img2pdf.convert(str(raster_path),
                                   layout_fun=img2pdf.get_fixed_dpi_layout_fun((self.DPI, self.DPI)),
                                   engine=img2pdf.Engine.internal)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def _set_metadata(pdf: pikepdf.Pdf, title: str) -> None:
        """
        Sets the XMP metadata of a PDF.

        :param pdf: The PDF.
        :param title: The title of the document.
        """
        with pdf.open_metadata() as meta:
            meta.mark = False
            now = datetime.datetime.now(datetime.timezone.utc).strftime("%Y-%m-%dT%H:%M:%S%z")
            meta['dc:title'] = title
            meta['xmp:CreateDate'] = now
            meta['xmp:MetadataDate'] = now
            meta['xmp:CreatorTool'] = 'doc-scanner'

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def _save_pdf(pdf: pikepdf.Pdf, path: Path) -> None:
        """
        Saves a PDF atomically, i.e. a partially written document is never observable at the path.

        :param pdf: The PDF.
        :param path: The path of the document.
        """
        handle, tmp_name = tempfile.mkstemp(prefix=f'.{path.stem}-', suffix='.part', dir=path.parent)
        os.close(handle)
        try:
            pdf.save(tmp_name)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

# ----------------------------------------------------------------------------------------------------------------------
