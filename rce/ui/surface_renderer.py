# File: rce/ui/surface_renderer.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Renderer raster sobre un QImage (backing store de la superficie).
# Notes:
#   - Implementa CurveRendererContract; el widget solo muestra el QImage.
#   - Curva como cúbica con primer handle = inicio y segundo = ctrl.
#   - Qt6/PySide6: QPainter siempre se cierra con end() (try/finally).
from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen

from rce.core.renderer import CurveRendererContract, MarkerColor
from rce.core.version import DEFAULT_MARKER_RADIUS
from rce.geom.points import Point, fit_scale
from rce.utils.errors import RceIOError
from rce.utils.log import get_logger

log = get_logger(__name__)

MARKER_COLORS = {
    MarkerColor.GREEN: QColor(0, 128, 0),
    MarkerColor.GOLD: QColor(255, 215, 0),
}
OUTLINE_COLOR = QColor(255, 255, 255)
CURVE_COLOR = QColor(255, 255, 255)
CURVE_WIDTH = 2.0
MARKER_OUTLINE_WIDTH = 1.0


def load_background_image(path: str | Path) -> QImage:
    """Lee una imagen de fondo. Lanza RceIOError si no se puede decodificar."""
    p = Path(path)
    if not p.is_file():
        raise RceIOError(f"No existe la imagen de fondo: {p}")
    img = QImage(str(p))
    if img.isNull():
        raise RceIOError(f"No se pudo leer la imagen de fondo: {p}")
    return img


class QImageSurfaceRenderer(CurveRendererContract):
    """Dibuja fondo, curva y marcadores sobre un QImage de tamaño fijo."""

    def __init__(self, width: int, height: int, *, marker_radius: float = DEFAULT_MARKER_RADIUS) -> None:
        self._image = QImage(int(width), int(height), QImage.Format_ARGB32_Premultiplied)
        self._image.fill(Qt.transparent)
        self._marker_radius = float(marker_radius)
        self._background: QImage | None = None

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def marker_radius(self) -> float:
        return self._marker_radius

    def size(self) -> tuple[int, int]:
        return int(self._image.width()), int(self._image.height())

    def has_background(self) -> bool:
        return self._background is not None

    def set_background(self, img: QImage | None) -> None:
        """Fija (o quita) la imagen de fondo. No redibuja: eso lo decide el controlador."""
        if img is not None and img.isNull():
            img = None
        self._background = img

    # ------------------------------
    # CurveRendererContract
    # ------------------------------
    def clear(self) -> None:
        self._image.fill(Qt.transparent)

    def draw_background(self) -> None:
        bg = self._background
        if bg is None:
            return
        w, h = self.size()
        ratio = fit_scale(bg.width(), bg.height(), w, h)
        if ratio <= 0.0:
            return
        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.SmoothPixmapTransform, True)
            target = QRectF(0.0, 0.0, bg.width() * ratio, bg.height() * ratio)
            painter.drawImage(target, bg, QRectF(bg.rect()))
        finally:
            painter.end()

    def draw_curve(self, p0: Point, ctrl: Point, p1: Point) -> None:
        path = QPainterPath(QPointF(p0.x, p0.y))
        path.cubicTo(QPointF(p0.x, p0.y), QPointF(ctrl.x, ctrl.y), QPointF(p1.x, p1.y))

        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            pen = QPen(CURVE_COLOR)
            pen.setWidthF(CURVE_WIDTH)
            painter.setPen(pen)
            painter.setBrush(Qt.NoBrush)
            painter.drawPath(path)
        finally:
            painter.end()

    def draw_marker(self, p: Point, color: MarkerColor) -> None:
        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            pen = QPen(OUTLINE_COLOR)
            pen.setWidthF(MARKER_OUTLINE_WIDTH)
            painter.setPen(pen)
            painter.setBrush(MARKER_COLORS[MarkerColor(color)])
            r = self._marker_radius
            painter.drawEllipse(QPointF(p.x, p.y), r, r)
        finally:
            painter.end()
