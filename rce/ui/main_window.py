# File: rce/ui/main_window.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Ventana principal: lienzo de curva + toolbar (Limpiar / Fondo) + barra de estado.
# Notes: El host solo cablea botones y carga del fondo; la edición vive en rce.core.controller.
from __future__ import annotations

import base64
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import QFileDialog, QLabel, QMainWindow, QStatusBar, QToolBar

from rce.core.models import EditorPhase
from rce.core.settings import AppSettings
from rce.core.version import APP_NAME, APP_VERSION
from rce.ui.canvas_view import CanvasView
from rce.utils.errors import RceError
from rce.utils.log import get_logger

log = get_logger(__name__)

PHASE_STATUS_TEXT = {
    EditorPhase.IDLE.value: "Listo: click o arrastre para el primer punto",
    EditorPhase.AWAITING_SECOND_POINT.value: "Esperando el segundo punto",
    EditorPhase.CURVE_EDITING.value: "Editando curva: arrastrá un punto verde",
}


class MainWindow(QMainWindow):
    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("{} v{}".format(APP_NAME, APP_VERSION))

        # Preferencias usuario (+ overrides por env / rce_settings.json)
        self._settings = settings if settings is not None else AppSettings.load()

        self._build_ui()
        self._build_toolbar()

        self.resize(self._settings.surface_w, self._settings.surface_h + 60)
        self._restore_ui_state()
        self._on_state_changed(self._canvas.phase().value)
        self._load_initial_background()

    def _build_ui(self) -> None:
        self._canvas = CanvasView(
            self,
            surface_size=(self._settings.surface_w, self._settings.surface_h),
            marker_radius=self._settings.marker_radius,
        )
        self._canvas.set_theme(self._settings.canvas_theme)
        self._canvas.state_changed.connect(self._on_state_changed)
        self.setCentralWidget(self._canvas)

        sb = QStatusBar(self)
        self.setStatusBar(sb)
        self._status_label = QLabel("Listo", self)
        sb.addPermanentWidget(self._status_label)

    def _build_toolbar(self) -> None:
        tb = QToolBar("Acciones", self)
        tb.setObjectName("tb_actions")
        tb.setMovable(True)
        tb.setFloatable(True)
        tb.setToolButtonStyle(Qt.ToolButtonTextOnly)

        act_clear = QAction("Limpiar", self)
        act_clear.setToolTip("Borrar la curva (Esc)")
        act_clear.setShortcut(QKeySequence(Qt.Key_Escape))
        act_clear.triggered.connect(self.action_clear)
        tb.addAction(act_clear)

        act_bg = QAction("Fondo…", self)
        act_bg.setToolTip("Elegir imagen de fondo")
        act_bg.triggered.connect(self.action_choose_background)
        tb.addAction(act_bg)

        self.addToolBar(Qt.TopToolBarArea, tb)

    # ------------------------------
    # Acciones
    # ------------------------------
    def action_clear(self) -> None:
        self._canvas.clear_curve()

    def action_choose_background(self) -> None:
        start_dir = str(Path(self._settings.background_image).parent) if self._settings.background_image else ""
        path, _ = QFileDialog.getOpenFileName(
            self,
            "Imagen de fondo",
            start_dir,
            "Imágenes (*.png *.jpg *.jpeg *.bmp *.gif);;Todos (*)",
        )
        if not path:
            return
        if self._set_background(Path(path)):
            self._settings.background_image = str(path)

    def _load_initial_background(self) -> None:
        p = self._settings.resolved_background_image()
        if p is None:
            log.info("Sin imagen de fondo configurada")
            return
        self._set_background(p)

    def _set_background(self, path: Path) -> bool:
        try:
            self._canvas.set_background_image(path)
            return True
        except RceError as e:
            log.warning("%s", e)
            self._status(str(e))
            return False

    def _on_state_changed(self, phase: str) -> None:
        self._status(PHASE_STATUS_TEXT.get(phase, phase))

    # ----------------------------
    # UI state persistente
    # ----------------------------
    def closeEvent(self, event: QCloseEvent) -> None:
        self._persist_ui_state()
        event.accept()

    def _restore_ui_state(self) -> None:
        try:
            if self._settings.ui_main_geometry_b64:
                raw = base64.b64decode(self._settings.ui_main_geometry_b64.encode("ascii"), validate=False)
                self.restoreGeometry(raw)
        except Exception:
            # No romper arranque
            log.debug("No se pudo restaurar la geometría", exc_info=True)

    def _persist_ui_state(self) -> None:
        try:
            self._settings.ui_main_geometry_b64 = base64.b64encode(bytes(self.saveGeometry())).decode("ascii")
        except Exception:
            log.debug("No se pudo capturar la geometría", exc_info=True)
        self._settings.save()

    def _status(self, text: str) -> None:
        self._status_label.setText(text)
