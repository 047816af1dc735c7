import itertools
import tempfile
import threading
import unittest
from unittest import mock
from pathlib import Path

import numpy as np
import pikepdf
from cleo.io.inputs.string_input import StringInput
from cleo.io.outputs.buffered_output import BufferedOutput

from doc_scanner.camera.Camera import Camera
from doc_scanner.error.CaptureFailure import CaptureFailure
from doc_scanner.error.DecodeFailure import DecodeFailure
from doc_scanner.error.DegenerateRegion import DegenerateRegion
from doc_scanner.error.InvalidGeometry import InvalidGeometry
from doc_scanner.error.IOFailure import IOFailure
from doc_scanner.error.ScanStateError import ScanStateError
from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.pdf.Config import Config as PdfConfig
from doc_scanner.pdf.PdfExporter import PdfExporter
from doc_scanner.scan.Config import Config
from doc_scanner.scan.CornerSet import CornerSet
from doc_scanner.scan.CropRegion import CropRegion
from doc_scanner.scan.DragEvent import DragEvent
from doc_scanner.scan.Image import Image
from doc_scanner.scan.Point import Point
from doc_scanner.session.ScanSession import ScanSession
from doc_scanner.session.ScanState import ScanState


class ImageCamera(Camera):
    """
    A camera that captures a given image.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, image: Image):
        self.image = image
        self.counter = itertools.count()

    # ------------------------------------------------------------------------------------------------------------------
    def capture(self, directory: Path) -> Path:
        path = directory / f'document_{next(self.counter)}.png'
        self.image.write(path)

        return path


# ----------------------------------------------------------------------------------------------------------------------
class BrokenCamera(Camera):
    """
    A camera that fails to capture.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def capture(self, directory: Path) -> Path:
        raise CaptureFailure('The camera is not available.')


# ----------------------------------------------------------------------------------------------------------------------
class GarbageCamera(Camera):
    """
    A camera that captures a file that is not an image.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self):
        self.path = None

    # ------------------------------------------------------------------------------------------------------------------
    def capture(self, directory: Path) -> Path:
        self.path = directory / 'document_garbage.jpg'
        self.path.write_bytes(b'This is not an image.')

        return self.path


# ----------------------------------------------------------------------------------------------------------------------
class BlockingCamera(ImageCamera):
    """
    A camera that waits before the capture completes.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, image: Image):
        super().__init__(image)
        self.path = None
        self.started = threading.Event()
        self.release = threading.Event()

    # ------------------------------------------------------------------------------------------------------------------
    def capture(self, directory: Path) -> Path:
        self.path = super().capture(directory)
        self.started.set()
        self.release.wait(10.0)

        return self.path


# ----------------------------------------------------------------------------------------------------------------------
class FaultyCamera(Camera):
    """
    A camera that fails with an error of the operating system.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def capture(self, directory: Path) -> Path:
        raise PermissionError('Permission denied: camera')


# ----------------------------------------------------------------------------------------------------------------------
class ScanSessionTest(unittest.TestCase):
    """
    Unit tests for the state machine of a scan.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def setUp(self):
        self.io = DocScannerIO(StringInput(''), BufferedOutput(), BufferedOutput())
        self.tmp = tempfile.TemporaryDirectory(prefix='doc-scanner-test-')
        self.tmp_path = Path(self.tmp.name)
        self.config = Config(viewport_width=1000.0, viewport_height=1000.0, storage_path=self.tmp_path)
        self.image = Image(np.random.default_rng(7).integers(0, 256, (1000, 2000, 3), dtype=np.uint8))
        self.corners = CornerSet((Point(60.0, 300.0), Point(560.0, 300.0), Point(560.0, 700.0), Point(60.0, 700.0)))

    # ------------------------------------------------------------------------------------------------------------------
    def tearDown(self):
        self.tmp.cleanup()

    # ------------------------------------------------------------------------------------------------------------------
    def _create_session(self) -> ScanSession:
        session = ScanSession(self.io, self.config, PdfConfig())
        self.addCleanup(session.close)

        return session

    # ------------------------------------------------------------------------------------------------------------------
    def _captured_session(self) -> ScanSession:
        session = self._create_session()
        self.assertEqual(ScanState.CAPTURED, session.capture(ImageCamera(self.image)).result())

        return session

    # ------------------------------------------------------------------------------------------------------------------
    def test_scan(self):
        """
        Test a scan from capture to saved PDF.
        """
        session = self._captured_session()
        self.assertEqual(ScanState.CAPTURED, session.state)
        self.assertEqual((2000, 1000), session.image.size())

        session.update_corners(self.corners)
        self.assertEqual(ScanState.ADJUSTING, session.state)

        self.assertEqual(ScanState.CROPPED, session.confirm_crop())
        self.assertEqual(CropRegion(190, 160, 1190, 960), session.region)
        self.assertEqual((1000, 800), session.cropped_image.size())
        self.assertTrue(np.array_equal(self.image.data[160:960, 190:1190], session.cropped_image.data))
        self.assertTrue(session.cropped_path.is_file())
        self.assertEqual('.png', session.cropped_path.suffix)

        self.assertEqual(ScanState.DONE, session.export('receipt').result())
        self.assertEqual(self.tmp_path / 'scans' / 'receipt.pdf', session.output_path)
        self.assertTrue(session.output_path.is_file())
        self.assertIsNone(session.error)

    # ------------------------------------------------------------------------------------------------------------------
    def test_default_file_name(self):
        """
        Test that a scan without a name is saved under a name derived from the current time.
        """
        session = self._captured_session()
        session.confirm_crop()
        session.export().result()

        self.assertEqual(ScanState.DONE, session.state)
        self.assertRegex(session.output_path.name, r'^scan_\d+\.pdf$')

    # ------------------------------------------------------------------------------------------------------------------
    def test_default_corners(self):
        """
        Test the corners right after capturing.
        """
        session = self._captured_session()

        self.assertEqual(CornerSet.centered_square(1000.0, 1000.0, 375.0), session.corners)

    # ------------------------------------------------------------------------------------------------------------------
    def test_drag(self):
        """
        Test dragging a corner.
        """
        session = self._captured_session()
        corners = session.drag([DragEvent.start(310.0, 315.0), DragEvent.move(-100.0, -50.0), DragEvent.end()])

        self.assertEqual(Point(212.5, 262.5), corners[0])
        self.assertEqual(corners, session.corners)
        self.assertEqual(ScanState.ADJUSTING, session.state)

    # ------------------------------------------------------------------------------------------------------------------
    def test_capture_failure(self):
        """
        Test that a failed capture can be retried.
        """
        session = self._create_session()

        self.assertEqual(ScanState.ERROR, session.capture(BrokenCamera()).result())
        self.assertIsInstance(session.error, CaptureFailure)
        self.assertIn('Capture the document again.', session.message)
        self.assertIsNone(session.image)

        self.assertEqual(ScanState.CAPTURED, session.capture(ImageCamera(self.image)).result())
        self.assertIsNone(session.error)

    # ------------------------------------------------------------------------------------------------------------------
    def test_decode_failure(self):
        """
        Test that an image that can not be decoded is discarded.
        """
        session = self._create_session()
        camera = GarbageCamera()

        self.assertEqual(ScanState.ERROR, session.capture(camera).result())
        self.assertIsInstance(session.error, DecodeFailure)
        self.assertIsNone(session.image)
        self.assertFalse(camera.path.exists())

        with self.assertRaises(ScanStateError):
            session.confirm_crop()

    # ------------------------------------------------------------------------------------------------------------------
    def test_degenerate_region(self):
        """
        Test that after a degenerate crop the corners can be adjusted and the image cropped again.
        """
        session = self._captured_session()
        session.update_corners(CornerSet((Point(500.0, 500.0),) * 4))

        self.assertEqual(ScanState.ERROR, session.confirm_crop())
        self.assertIsInstance(session.error, DegenerateRegion)
        self.assertIsNotNone(session.image)
        self.assertIsNone(session.cropped_image)

        session.update_corners(self.corners)
        self.assertEqual(ScanState.ADJUSTING, session.state)
        self.assertIsNone(session.error)
        self.assertEqual(ScanState.CROPPED, session.confirm_crop())

    # ------------------------------------------------------------------------------------------------------------------
    def test_export_failure(self):
        """
        Test that a failed export can be retried without cropping again.
        """
        session = self._captured_session()
        session.update_corners(self.corners)
        session.confirm_crop()

        blocker = self.tmp_path / 'scans'
        blocker.write_text('not a directory')

        self.assertEqual(ScanState.ERROR, session.export('receipt').result())
        self.assertIsInstance(session.error, IOFailure)
        self.assertIsNotNone(session.cropped_image)

        blocker.unlink()
        self.assertEqual(ScanState.DONE, session.export('receipt').result())
        self.assertTrue((self.tmp_path / 'scans' / 'receipt.pdf').is_file())

    # ------------------------------------------------------------------------------------------------------------------
    def test_invalid_transitions(self):
        """
        Test that actions are refused in states where they are not allowed.
        """
        session = self._create_session()

        with self.assertRaises(ScanStateError):
            session.confirm_crop()
        with self.assertRaises(ScanStateError):
            session.update_corners(self.corners)
        with self.assertRaises(ScanStateError):
            session.export('receipt')

        session.capture(ImageCamera(self.image)).result()

        with self.assertRaises(ScanStateError):
            session.capture(ImageCamera(self.image))
        with self.assertRaises(ScanStateError):
            session.export('receipt')

        session.confirm_crop()

        with self.assertRaises(ScanStateError):
            session.update_corners(self.corners)
        with self.assertRaises(ScanStateError):
            session.confirm_crop()

    # ------------------------------------------------------------------------------------------------------------------
    def test_unexpected_camera_failure(self):
        """
        Test that any failure of the camera is a capture failure that can be retried.
        """
        session = self._create_session()

        self.assertEqual(ScanState.ERROR, session.capture(FaultyCamera()).result())
        self.assertIsInstance(session.error, CaptureFailure)
        self.assertIsInstance(session.error.__cause__, PermissionError)

        self.assertEqual(ScanState.CAPTURED, session.capture(ImageCamera(self.image)).result())

    # ------------------------------------------------------------------------------------------------------------------
    def test_invalid_geometry(self):
        """
        Test that a crop with an invalid viewport fails and the corners can still be adjusted.
        """
        self.config = Config(viewport_width=0.0, viewport_height=1000.0, storage_path=self.tmp_path)
        session = self._captured_session()

        self.assertEqual(ScanState.ERROR, session.confirm_crop())
        self.assertIsInstance(session.error, InvalidGeometry)
        self.assertIsNone(session.cropped_image)

        session.update_corners(self.corners)
        self.assertEqual(ScanState.ADJUSTING, session.state)
        self.assertIsNone(session.error)

    # ------------------------------------------------------------------------------------------------------------------
    def test_crop_save_failure(self):
        """
        Test that the crop can be confirmed again after saving the cropped image failed.
        """
        session = self._captured_session()
        session.update_corners(self.corners)

        with mock.patch.object(Image, 'write', side_effect=IOFailure('disk full')):
            self.assertEqual(ScanState.ERROR, session.confirm_crop())
        self.assertIsInstance(session.error, IOFailure)
        self.assertIsNone(session.cropped_image)
        self.assertEqual([], list(self.tmp_path.glob('cropped_image_*')))

        self.assertEqual(ScanState.CROPPED, session.confirm_crop())
        self.assertTrue(session.cropped_path.is_file())

    # ------------------------------------------------------------------------------------------------------------------
    def test_export_thin_crop(self):
        """
        Test exporting a crop of a single pixel wide.
        """
        session = self._captured_session()
        session.update_corners(CornerSet((Point(100.0, 300.0),
                                          Point(100.5, 300.0),
                                          Point(100.5, 700.0),
                                          Point(100.0, 700.0))))
        self.assertEqual(ScanState.CROPPED, session.confirm_crop())
        self.assertEqual(CropRegion(270, 160, 271, 960), session.region)

        self.assertEqual(ScanState.DONE, session.export('thin').result())
        with pikepdf.open(session.output_path) as pdf:
            self.assertEqual([0.0, 0.0, 1.0, 800.0], [float(value) for value in pdf.pages[0].mediabox])

    # ------------------------------------------------------------------------------------------------------------------
    def test_unexpected_export_failure(self):
        """
        Test that any failure while exporting is an IO failure and the export can be retried.
        """
        session = self._captured_session()
        session.confirm_crop()

        with mock.patch.object(PdfExporter, 'export', side_effect=RuntimeError('out of memory')):
            self.assertEqual(ScanState.ERROR, session.export('receipt').result())
        self.assertIsInstance(session.error, IOFailure)
        self.assertIsNotNone(session.cropped_image)

        self.assertEqual(ScanState.DONE, session.export('receipt').result())

    # ------------------------------------------------------------------------------------------------------------------
    def test_abandon_after_crop(self):
        """
        Test that abandoning a cropped scan removes the captured and the cropped image.
        """
        session = self._captured_session()
        session.confirm_crop()
        cropped_path = session.cropped_path

        session.abandon()

        self.assertFalse(cropped_path.exists())
        self.assertEqual([], list(self.tmp_path.glob('document_*')))
        self.assertEqual([], list(self.tmp_path.glob('cropped_image_*')))

    # ------------------------------------------------------------------------------------------------------------------
    def test_abandon_during_capture(self):
        """
        Test that an image captured for an abandoned scan is discarded.
        """
        session = self._create_session()
        camera = BlockingCamera(self.image)

        future = session.capture(camera)
        self.assertTrue(camera.started.wait(10.0))
        self.assertEqual(ScanState.CAPTURING, session.state)

        session.abandon()
        camera.release.set()

        self.assertEqual(ScanState.IDLE, future.result())
        self.assertIsNone(session.image)
        self.assertFalse(camera.path.exists())

    # ------------------------------------------------------------------------------------------------------------------
    def test_abandon_after_capture(self):
        """
        Test that abandoning a scan removes the captured image.
        """
        session = self._create_session()
        camera = ImageCamera(self.image)
        session.capture(camera).result()

        session.abandon()

        self.assertEqual([], list(self.tmp_path.glob('document_*')))


# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
