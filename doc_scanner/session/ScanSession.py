import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List

from cleo.ui.table import Table

from doc_scanner.camera.Camera import Camera
from doc_scanner.error.CaptureFailure import CaptureFailure
from doc_scanner.error.DecodeFailure import DecodeFailure
from doc_scanner.error.DegenerateRegion import DegenerateRegion
from doc_scanner.error.InvalidGeometry import InvalidGeometry
from doc_scanner.error.IOFailure import IOFailure
from doc_scanner.error.ScanError import ScanError
from doc_scanner.error.ScanStateError import ScanStateError
from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.pdf.Config import Config as PdfConfig
from doc_scanner.pdf.PdfExporter import PdfExporter
from doc_scanner.scan.BoundingBoxCropper import BoundingBoxCropper
from doc_scanner.scan.Config import Config
from doc_scanner.scan.CornerDragger import CornerDragger
from doc_scanner.scan.CornerSet import CornerSet
from doc_scanner.scan.CropRegion import CropRegion
from doc_scanner.scan.DragEvent import DragEvent
from doc_scanner.scan.GeometryMapper import GeometryMapper
from doc_scanner.scan.Image import Image
from doc_scanner.scan.Point import Point
from doc_scanner.session.ScanState import ScanState
from doc_scanner.storage import now_millis
from doc_scanner.storage.ScanStorage import ScanStorage


class ScanSession:
    """
    Class for a single scan: capture, adjustment of the corners, crop, and export as PDF. Capturing and exporting run
    on an executor and report completion via futures.
    """
    HINTS = {CaptureFailure:   'Capture the document again.',
             DecodeFailure:    'Start a new scan.',
             InvalidGeometry:  'The crop has been aborted.',
             DegenerateRegion: 'Adjust the corners and crop again.',
             IOFailure:        'Try again with the same or another file name.'}
    """
    The hints shown to the user per kind of error.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self,
                 io: DocScannerIO,
                 config: Config,
                 pdf_config: PdfConfig,
                 executor: Executor | None = None):
        """
        Object constructor.

        :param io: The Output decorator.
        :param config: The configuration.
        :param pdf_config: The configuration for exporting PDF documents.
        :param executor: The executor for capturing and exporting. When omitted the session owns a single worker
                         thread.
        """
        self._io: DocScannerIO = io
        """
        The Output decorator.
        """

        self._config: Config = config
        """
        The configuration.
        """

        self._storage: ScanStorage = ScanStorage(config.storage_path)
        """
        The app-private storage.
        """

        self._mapper: GeometryMapper = GeometryMapper(io, config)
        """
        The mapper from display space to image space.
        """

        self._cropper: BoundingBoxCropper = BoundingBoxCropper(io)
        """
        The cropper.
        """

        self._dragger: CornerDragger = CornerDragger(config.handle_radius)
        """
        The reducer of drag gestures.
        """

        self._exporter: PdfExporter = PdfExporter(io, pdf_config)
        """
        The PDF exporter.
        """

        self._own_executor: bool = executor is None
        """
        Whether this session owns the executor.
        """

        self._executor: Executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix='scan-session')
        """
        The executor for capturing and exporting.
        """

        self._state: ScanState = ScanState.IDLE
        """
        The current state.
        """

        self._error: ScanError | None = None
        """
        The error of the last failed action.
        """

        self._message: str | None = None
        """
        The message shown to the user for the last failed action.
        """

        self._abandoned: bool = False
        """
        Whether the user has abandoned this scan.
        """

        self._lock: threading.Lock = threading.Lock()
        """
        The lock between abandoning this scan and the completion of a capture or an export.
        """

        self._capture_path: Path | None = None
        """
        The path to the captured image.
        """

        self._image: Image | None = None
        """
        The captured image.
        """

        self._corners: CornerSet | None = None
        """
        The corners in display space.
        """

        self._region: CropRegion | None = None
        """
        The crop region in image space.
        """

        self._cropped_path: Path | None = None
        """
        The path to the cropped image.
        """

        self._cropped_image: Image | None = None
        """
        The cropped image.
        """

        self._output_path: Path | None = None
        """
        The path to the saved PDF.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def state(self) -> ScanState:
        return self._state

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def error(self) -> ScanError | None:
        return self._error

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def message(self) -> str | None:
        return self._message

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def image(self) -> Image | None:
        return self._image

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def corners(self) -> CornerSet | None:
        return self._corners

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def region(self) -> CropRegion | None:
        return self._region

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def cropped_image(self) -> Image | None:
        return self._cropped_image

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def cropped_path(self) -> Path | None:
        return self._cropped_path

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def output_path(self) -> Path | None:
        return self._output_path

    # ------------------------------------------------------------------------------------------------------------------
    def capture(self, camera: Camera) -> 'Future[ScanState]':
        """
        Captures an image with a camera. The future resolves to the state after capturing.

        :param camera: The camera.
        """
        if self._state not in (ScanState.IDLE, ScanState.ERROR):
            raise ScanStateError(f'Unable to capture an image in state {self._state.name}.')

        self._reset()
        self._state = ScanState.CAPTURING

        return self._executor.submit(self._capture, camera)

    # ------------------------------------------------------------------------------------------------------------------
    def _capture(self, camera: Camera) -> ScanState:
        """
        Captures and decodes an image.

        :param camera: The camera.
        """
        self._io.text('')
        self._io.title('Capturing Image')

        path = None
        try:
            path = self._capture_raw(camera)
            self._io.log_notice(f'Captured image <fso>{path}</fso>.')
            image = Image.read(path)
        except ScanError as error:
            self._storage.discard(path)
            self._fail(error)
            return self._state

        box_size = self._config.corner_box_fraction * min(self._config.viewport_width, self._config.viewport_height)
        with self._lock:
            if self._abandoned:
                self._io.log_verbose(f'Discarding image <fso>{path}</fso> of abandoned scan.')
                self._storage.discard(path)
                self._state = ScanState.IDLE
                return self._state

            self._capture_path = path
            self._image = image
            self._corners = CornerSet.centered_square(self._config.viewport_width,
                                                      self._config.viewport_height,
                                                      box_size)
            self._state = ScanState.CAPTURED

        self._io.log_verbose(f'Image size: {image.width}x{image.height}.')
        self._io.log_very_verbose('Default corners: ' +
                                  ', '.join(f'({corner.x:.1f}, {corner.y:.1f})' for corner in self._corners) + '.')

        return self._state

    # ------------------------------------------------------------------------------------------------------------------
    def _capture_raw(self, camera: Camera) -> Path:
        """
        Lets the camera capture an image into the app-private storage. Any failure of the camera is reported as a
        CaptureFailure.

        :param camera: The camera.
        """
        directory = self._storage.prepare()
        try:
            return camera.capture(directory)
        except ScanError:
            raise
        except Exception as error:
            raise CaptureFailure(f'The camera failed: {error}') from error

    # ------------------------------------------------------------------------------------------------------------------
    def update_corners(self, corners: CornerSet) -> None:
        """
        Replaces the corners. The last update wins.

        :param corners: The corners in display space.
        """
        self._require_adjustable('adjust the corners')

        self._corners = corners
        self._error = None
        self._message = None
        self._state = ScanState.ADJUSTING

    # ------------------------------------------------------------------------------------------------------------------
    def drag(self, events: Iterable[DragEvent]) -> CornerSet:
        """
        Applies drag gestures to the corners and returns the updated corners.

        :param events: The drag events.
        """
        self._require_adjustable('drag the corners')
        self.update_corners(self._dragger.apply(self._corners, events))

        return self._corners

    # ------------------------------------------------------------------------------------------------------------------
    def confirm_crop(self) -> ScanState:
        """
        Maps the corners to the captured image, crops the image to the bounding box of the corners, and saves the
        cropped image. Returns the state after cropping.
        """
        self._require_adjustable('crop the image')

        self._io.text('')
        self._io.title('Cropping Image')

        try:
            points = self._mapper.map_corners(self._corners,
                                              self._image.width,
                                              self._image.height,
                                              self._config.viewport_width,
                                              self._config.viewport_height)
            self._log_corners(points)
            region, cropped_image = self._cropper.crop(self._image, points)
            cropped_path = self._storage.crop_path()
            cropped_image.write(cropped_path)
        except ScanError as error:
            self._fail(error)
            return self._state

        self._region = region
        self._cropped_image = cropped_image
        self._cropped_path = cropped_path
        self._state = ScanState.CROPPED
        self._io.log_notice(f'Saved cropped image as <fso>{cropped_path}</fso>.')

        return self._state

    # ------------------------------------------------------------------------------------------------------------------
    def export(self, file_name: str | None = None) -> 'Future[ScanState]':
        """
        Exports the cropped image as a PDF document in the scans folder. The future resolves to the state after
        exporting.

        :param file_name: The name of the document. Defaults to a name derived from the current time.
        """
        if not (self._state == ScanState.CROPPED or
                (self._state == ScanState.ERROR and self._cropped_image is not None)):
            raise ScanStateError(f'Unable to export in state {self._state.name}.')

        self._state = ScanState.EXPORTING

        return self._executor.submit(self._export, file_name or f'scan_{now_millis()}')

    # ------------------------------------------------------------------------------------------------------------------
    def _export(self, file_name: str) -> ScanState:
        """
        Exports the cropped image as a PDF document.

        :param file_name: The name of the document.
        """
        self._io.text('')
        self._io.title('Saving PDF')

        try:
            path = self._write_pdf(file_name)
        except ScanError as error:
            self._fail(error)
            return self._state

        with self._lock:
            self._output_path = path
            self._error = None
            self._message = None
            self._state = ScanState.DONE
            if self._abandoned:
                self._discard_intermediates()

        return self._state

    # ------------------------------------------------------------------------------------------------------------------
    def _write_pdf(self, file_name: str) -> Path:
        """
        Writes the cropped image as a PDF document in the scans folder. Any failure is reported as an IOFailure.

        :param file_name: The name of the document.
        """
        try:
            return self._exporter.export(self._cropped_image, self._storage.scans_path, file_name)
        except ScanError:
            raise
        except Exception as error:
            raise IOFailure(f"Unable to save PDF '{file_name}': {error}") from error

    # ------------------------------------------------------------------------------------------------------------------
    def abandon(self) -> None:
        """
        Abandons this scan and removes its intermediate images. A capture in progress is discarded when it completes,
        an export in progress is completed.
        """
        with self._lock:
            self._abandoned = True
            if self._state not in (ScanState.CAPTURING, ScanState.EXPORTING):
                self._discard_intermediates()

    # ------------------------------------------------------------------------------------------------------------------
    def _discard_intermediates(self) -> None:
        """
        Removes the captured and the cropped image of this scan.
        """
        self._storage.discard(self._capture_path)
        self._storage.discard(self._cropped_path)
        self._capture_path = None
        self._cropped_path = None

    # ------------------------------------------------------------------------------------------------------------------
    def close(self) -> None:
        """
        Waits for pending actions and releases the executor when owned by this session.
        """
        if self._own_executor:
            self._executor.shutdown(wait=True)

    # ------------------------------------------------------------------------------------------------------------------
    def _require_adjustable(self, action: str) -> None:
        """
        Raises an exception when the corners can not be adjusted or the image can not be cropped.

        :param action: The action for the error message.
        """
        if self._state in (ScanState.CAPTURED, ScanState.ADJUSTING):
            return

        if self._state == ScanState.ERROR and self._image is not None and self._cropped_image is None:
            return

        raise ScanStateError(f'Unable to {action} in state {self._state.name}.')

    # ------------------------------------------------------------------------------------------------------------------
    def _fail(self, error: ScanError) -> None:
        """
        Enters the error state and shows the error to the user.

        :param error: The error.
        """
        if isinstance(error, DecodeFailure):
            self._storage.discard(self._capture_path)
            self._reset()

        self._error = error
        self._message = f'{error} {self.HINTS.get(type(error), "")}'.strip()
        self._state = ScanState.ERROR
        self._io.error([error.__class__.__name__, str(error), self.HINTS.get(type(error), '')])

    # ------------------------------------------------------------------------------------------------------------------
    def _reset(self) -> None:
        """
        Forgets everything of a previous scan.
        """
        self._error = None
        self._message = None
        self._abandoned = False
        self._capture_path = None
        self._image = None
        self._corners = None
        self._region = None
        self._cropped_path = None
        self._cropped_image = None
        self._output_path = None

    # ------------------------------------------------------------------------------------------------------------------
    def _log_corners(self, points: List[Point]) -> None:
        """
        Logs the corners in display space and image space in nice table.

        :param points: The corners in image space.
        """
        if not self._io.is_verbose():
            return

        table = Table(self._io)

        headers = ['corner', 'display x', 'display y', 'image x', 'image y']
        rows = []
        for index, (corner, point) in enumerate(zip(self._corners, points)):
            rows.append([str(index), f'{corner.x:.1f}', f'{corner.y:.1f}', f'{point.x:.1f}', f'{point.y:.1f}'])

        self._io.text('')
        table.set_headers(headers)
        table.set_rows(rows)
        table.render()

# ----------------------------------------------------------------------------------------------------------------------
