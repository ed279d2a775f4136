# File: rce/ui/canvas_view.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Superficie de dibujo (QWidget): muestra el backing store y enruta el mouse al controlador.
# Notes:
#   - El backing store tiene tamaño fijo; el widget lo muestra estirado.
#     Las posiciones del mouse se reescalan con widget_to_surface.
#   - Solo botón izquierdo. Todo corre en el hilo UI (sin locks).
from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QRectF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from rce.core.controller import CurveEditorController
from rce.core.curve_store import CurveStore
from rce.core.models import EditorPhase
from rce.core.version import DEFAULT_MARKER_RADIUS, DEFAULT_SURFACE_SIZE
from rce.geom.points import Point, widget_to_surface
from rce.ui.surface_renderer import QImageSurfaceRenderer, load_background_image
from rce.utils.log import get_logger

log = get_logger(__name__)


class CanvasView(QWidget):
    state_changed = Signal(str)  # EditorPhase.value
    background_changed = Signal(str)  # ruta de la imagen

    THEME_PRESETS = {
        "dark": (30, 30, 30),
        "mid": (55, 55, 55),
        "light": (235, 235, 235),
    }

    def __init__(
        self,
        parent=None,
        *,
        surface_size: tuple[int, int] = DEFAULT_SURFACE_SIZE,
        marker_radius: int = DEFAULT_MARKER_RADIUS,
    ) -> None:
        super().__init__(parent)

        w, h = int(surface_size[0]), int(surface_size[1])
        self._renderer = QImageSurfaceRenderer(w, h, marker_radius=marker_radius)
        self._store = CurveStore()
        # Mismo radio para dibujar y para hit-test.
        self._controller = CurveEditorController(
            self._store,
            self._renderer,
            marker_radius=marker_radius,
            on_state_changed=self._on_phase_changed,
        )

        self._bg_color = QColor(*self.THEME_PRESETS["dark"])
        self._theme_id = "dark"

        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(False)

        self._controller.repaint()

    # ------------------------------
    # API pública
    # ------------------------------
    @property
    def controller(self) -> CurveEditorController:
        return self._controller

    @property
    def renderer(self) -> QImageSurfaceRenderer:
        return self._renderer

    def phase(self) -> EditorPhase:
        return self._store.phase

    def theme_id(self) -> str:
        return self._theme_id

    def set_theme(self, theme_id: str) -> None:
        tid = (theme_id or "").strip().lower()
        if tid not in self.THEME_PRESETS:
            tid = "dark"
        self._theme_id = tid
        self._bg_color = QColor(*self.THEME_PRESETS[tid])
        self.update()

    def set_background_image(self, path: str | Path) -> None:
        """Carga la imagen de fondo y dispara la señal "ready" del controlador.

        Lanza RceIOError si no se puede leer (el fondo anterior se conserva).
        """
        img = load_background_image(path)
        self._renderer.set_background(img)
        log.info("Fondo cargado: %s (%dx%d)", path, img.width(), img.height())
        self._controller.background_ready()
        self.update()
        self.background_changed.emit(str(path))

    def clear_curve(self) -> None:
        """Disparador externo "Limpiar"."""
        self._controller.reset()
        self.update()

    def sizeHint(self) -> QSize:
        w, h = self._renderer.size()
        return QSize(w, h)

    # ------------------------------
    # Qt events
    # ------------------------------
    def _surface_pos(self, event) -> Point:
        p = event.position()
        sw, sh = self._renderer.size()
        return widget_to_surface(p.x(), p.y(), self.width(), self.height(), sw, sh)

    def mousePressEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        self._controller.pointer_down(self._surface_pos(event))
        self.update()
        event.accept()

    def mouseMoveEvent(self, event) -> None:
        if not self._controller.button_held:
            super().mouseMoveEvent(event)
            return
        self._controller.pointer_move(self._surface_pos(event))
        self.update()
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._controller.pointer_up(self._surface_pos(event))
        self.update()
        event.accept()

    def paintEvent(self, event) -> None:
        _ = event
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), self._bg_color)
            painter.setRenderHint(QPainter.SmoothPixmapTransform, True)
            img = self._renderer.image
            painter.drawImage(QRectF(self.rect()), img, QRectF(img.rect()))
        finally:
            painter.end()

    def _on_phase_changed(self, phase: EditorPhase) -> None:
        self.state_changed.emit(phase.value)
