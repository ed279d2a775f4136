"""Renderer raster (QImage) y CanvasView, sin display (QT_QPA_PLATFORM=offscreen)."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

try:
    from PySide6.QtCore import QPoint, Qt
    from PySide6.QtGui import QColor, QImage
    from PySide6.QtTest import QTest
    from PySide6.QtWidgets import QApplication
except ImportError:  # pragma: no cover
    QApplication = None  # type: ignore

from rce.core.models import EditorPhase
from rce.core.renderer import MarkerColor
from rce.geom import Point, midpoint, widget_to_surface
from rce.utils.errors import RceIOError


def _app():
    return QApplication.instance() or QApplication([])


@unittest.skipIf(QApplication is None, "PySide6 no disponible")
class TestQImageSurfaceRenderer(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = _app()

    def setUp(self) -> None:
        from rce.ui.surface_renderer import QImageSurfaceRenderer

        self.r = QImageSurfaceRenderer(100, 100, marker_radius=8)

    def test_background_is_noop_until_ready(self) -> None:
        self.assertFalse(self.r.has_background())
        self.r.draw_background()
        self.assertEqual(self.r.image.pixelColor(10, 10).alpha(), 0)

    def test_background_fits_keeping_aspect(self) -> None:
        bg = QImage(200, 100, QImage.Format_ARGB32)
        bg.fill(QColor(255, 0, 0))
        self.r.set_background(bg)
        self.r.draw_background()
        inside = self.r.image.pixelColor(10, 10)
        self.assertEqual((inside.red(), inside.green(), inside.blue(), inside.alpha()), (255, 0, 0, 255))
        # 200x100 en 100x100 -> 100x50: la mitad inferior queda vacía.
        self.assertEqual(self.r.image.pixelColor(10, 80).alpha(), 0)

    def test_marker_colors(self) -> None:
        self.r.draw_marker(Point(30, 30), MarkerColor.GREEN)
        self.r.draw_marker(Point(70, 70), MarkerColor.GOLD)
        g = self.r.image.pixelColor(30, 30)
        y = self.r.image.pixelColor(70, 70)
        self.assertEqual((g.red(), g.green(), g.blue()), (0, 128, 0))
        self.assertEqual((y.red(), y.green(), y.blue()), (255, 215, 0))

    def test_curve_and_clear(self) -> None:
        self.r.draw_curve(Point(10, 50), Point(50, 50), Point(90, 50))
        c = self.r.image.pixelColor(50, 50)
        self.assertGreater(c.alpha(), 0)
        self.assertGreater(c.red(), 200)
        self.r.clear()
        self.assertEqual(self.r.image.pixelColor(50, 50).alpha(), 0)

    def test_load_background_image_errors(self) -> None:
        from rce.ui.surface_renderer import load_background_image

        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(RceIOError):
                load_background_image(Path(d) / "no_existe.png")
            bad = Path(d) / "roto.png"
            bad.write_bytes(b"no es una imagen")
            with self.assertRaises(RceIOError):
                load_background_image(bad)


@unittest.skipIf(QApplication is None, "PySide6 no disponible")
class TestCanvasView(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = _app()

    def setUp(self) -> None:
        from rce.ui.canvas_view import CanvasView

        self.view = CanvasView(surface_size=(200, 100), marker_radius=8)
        # Widget a mitad de tamaño: las posiciones se escalan x2.
        self.view.resize(100, 50)
        self.view.show()
        self.phases: list[str] = []
        self.view.state_changed.connect(self.phases.append)

    def tearDown(self) -> None:
        self.view.close()
        self.view.deleteLater()

    def _click(self, x: int, y: int) -> None:
        QTest.mousePress(self.view, Qt.LeftButton, Qt.NoModifier, QPoint(x, y))
        QTest.mouseRelease(self.view, Qt.LeftButton, Qt.NoModifier, QPoint(x, y))

    def _surface(self, x: int, y: int) -> Point:
        return widget_to_surface(x, y, self.view.width(), self.view.height(), 200, 100)

    def test_clicks_place_curve_in_surface_coordinates(self) -> None:
        self._click(10, 10)
        self.assertEqual(self.view.phase(), EditorPhase.AWAITING_SECOND_POINT)
        self._click(40, 10)
        curve = self.view.controller.store.get_curve()
        self.assertIsNotNone(curve)
        start, end = self._surface(10, 10), self._surface(40, 10)
        self.assertEqual(curve.start, start)
        self.assertEqual(curve.end, end)
        self.assertEqual(curve.mid, midpoint(start, end))
        self.assertEqual(self.phases[-1], EditorPhase.CURVE_EDITING.value)

    def test_double_click_same_spot_ends_idle(self) -> None:
        self._click(10, 10)
        self._click(10, 10)
        self.assertEqual(self.view.phase(), EditorPhase.IDLE)
        self.assertFalse(self.view.controller.store.has_pending_point())
        self.assertIsNone(self.view.controller.store.get_curve())
        self.assertEqual(self.phases[-1], EditorPhase.IDLE.value)

    def test_clear_curve(self) -> None:
        self._click(10, 10)
        self._click(40, 10)
        self.view.clear_curve()
        self.assertIsNone(self.view.controller.store.get_curve())
        self.assertEqual(self.phases[-1], EditorPhase.IDLE.value)

    def test_background_image_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "bg.png"
            img = QImage(20, 10, QImage.Format_ARGB32)
            img.fill(QColor(0, 0, 255))
            self.assertTrue(img.save(str(p)))

            self.view.set_background_image(p)
            self.assertTrue(self.view.renderer.has_background())
            px = self.view.renderer.image.pixelColor(5, 5)
            self.assertEqual((px.red(), px.green(), px.blue()), (0, 0, 255))

    def test_missing_background_raises(self) -> None:
        with self.assertRaises(RceIOError):
            self.view.set_background_image("/no/existe/bg.png")
        self.assertFalse(self.view.renderer.has_background())


if __name__ == "__main__":
    unittest.main()
