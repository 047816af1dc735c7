import re
from pathlib import Path
from typing import List

from cleo.commands.command import Command
from cleo.helpers import argument, option

from doc_scanner.camera.FileCamera import FileCamera
from doc_scanner.error.ScanError import ScanError
from doc_scanner.io.DocScannerIO import DocScannerIO
from doc_scanner.pdf.Config import Config as PdfConfig
from doc_scanner.scan.Config import Config
from doc_scanner.scan.CornerSet import CornerSet
from doc_scanner.scan.DragEvent import DragEvent
from doc_scanner.scan.Point import Point
from doc_scanner.session.ScanSession import ScanSession
from doc_scanner.session.ScanState import ScanState


class ScanCommand(Command):
    """
    The scan command: captures a photo, crops it to the corners of the document, and saves it as PDF.
    """
    name = 'scan'
    description = 'Crops a photo of a document and saves it as PDF in the scans folder'
    options = [option(long_name='name',
                      description='The name of the saved scan. Defaults to scan_<timestamp>.',
                      flag=False),
               option(long_name='corner',
                      short_name='c',
                      description='The position of a corner in display space (x,y). Give exactly 4 corners.',
                      flag=False,
                      multiple=True),
               option(long_name='drag',
                      description='A drag gesture in display space, starting at a position and moving by a delta '
                                  '(x,y:dx,dy).',
                      flag=False,
                      multiple=True),
               option(long_name='viewport-width',
                      description='The width of the viewport on which the photo is displayed.',
                      default=1080,
                      flag=False),
               option(long_name='viewport-height',
                      description='The height of the viewport on which the photo is displayed.',
                      default=1920,
                      flag=False),
               option(long_name='fine-tune-x',
                      description='The calibration offset along the x-axis of the display.',
                      default=35.0,
                      flag=False),
               option(long_name='fine-tune-y',
                      description='The calibration offset along the y-axis of the display.',
                      default=30.0,
                      flag=False),
               option(long_name='handle-radius',
                      description='The radius around a corner in which a drag selects that corner.',
                      default=50.0,
                      flag=False),
               option(long_name='corner-box-fraction',
                      description='The size of the initial square of corners relative to the viewport.',
                      default=0.375,
                      flag=False),
               option(long_name='quality',
                      description='The quality of the image when saved in the PDF.',
                      default=100,
                      flag=False),
               option(long_name='storage',
                      short_name='s',
                      description='The path to the app-private storage.',
                      default=str(Path.home() / '.doc-scanner'),
                      flag=False)]
    arguments = [argument(name='photo', description='The photo of the document.')]

    NUMBER = r'-?\d+(?:\.\d+)?'
    """
    The pattern of a number in a corner or drag option.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the scan command.
        """
        io = DocScannerIO(self._io.input, self._io.output, self._io.error_output)
        config = self._create_config()
        corners = self._extract_corners()
        drag_events = self._extract_drag_events()

        session = ScanSession(io, config, PdfConfig(quality=int(self.option('quality'))))
        try:
            state = session.capture(FileCamera(Path(self.argument('photo')))).result()
            if state == ScanState.ERROR:
                return 1

            if corners is not None:
                session.update_corners(corners)
            if drag_events:
                session.drag(drag_events)

            if session.confirm_crop() == ScanState.ERROR:
                return 1

            if session.export(self.option('name')).result() == ScanState.ERROR:
                return 1
        finally:
            session.close()

        io.text('')

        return 0

    # ------------------------------------------------------------------------------------------------------------------
    def _create_config(self) -> Config:
        """
        Creates a Config object from the given options.
        """
        return Config(viewport_width=float(self.option('viewport-width')),
                      viewport_height=float(self.option('viewport-height')),
                      fine_tune_x=float(self.option('fine-tune-x')),
                      fine_tune_y=float(self.option('fine-tune-y')),
                      handle_radius=float(self.option('handle-radius')),
                      corner_box_fraction=float(self.option('corner-box-fraction')),
                      storage_path=Path(self.option('storage')))

    # ------------------------------------------------------------------------------------------------------------------
    def _extract_corners(self) -> CornerSet | None:
        """
        Extracts the corners from the given options.
        """
        values = self.option('corner')
        if not values:
            return None

        if len(values) != 4:
            raise ScanError(f'Exactly 4 corners are required, got {len(values)}.')

        points = []
        for value in values:
            parts = re.fullmatch(rf'\s*(?P<x>{self.NUMBER})\s*,\s*(?P<y>{self.NUMBER})\s*', value)
            if parts is None:
                raise ScanError(f'Invalid corner: {value}')
            points.append(Point(float(parts.group('x')), float(parts.group('y'))))

        return CornerSet(tuple(points))

    # ------------------------------------------------------------------------------------------------------------------
    def _extract_drag_events(self) -> List[DragEvent]:
        """
        Extracts the drag gestures from the given options.
        """
        events = []
        for value in self.option('drag'):
            parts = re.fullmatch(rf'\s*(?P<x>{self.NUMBER}),(?P<y>{self.NUMBER}):'
                                 rf'(?P<dx>{self.NUMBER}),(?P<dy>{self.NUMBER})\s*',
                                 value)
            if parts is None:
                raise ScanError(f'Invalid drag: {value}')
            events.append(DragEvent.start(float(parts.group('x')), float(parts.group('y'))))
            events.append(DragEvent.move(float(parts.group('dx')), float(parts.group('dy'))))
            events.append(DragEvent.end())

        return events

# ----------------------------------------------------------------------------------------------------------------------
