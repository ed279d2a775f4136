# File: rce/core/controller.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Máquina de estados de edición: eventos de puntero -> store -> renderer.
# Notes:
#   - Sin Qt: recibe Point ya convertidos a coordenadas de superficie.
#   - Ningún input del usuario lanza; los casos fuera de política son no-ops.
#   - Cada redibujo es completo: clear -> fondo -> curva -> marcadores.
from __future__ import annotations

from typing import Callable, Optional

from rce.core.curve_store import CurveStore
from rce.core.models import (
    AwaitingSecondPoint,
    ControlPointId,
    Curve,
    CurveEditing,
    EditorPhase,
)
from rce.core.renderer import CurveRendererContract, MarkerColor
from rce.core.version import DEFAULT_MARKER_RADIUS
from rce.geom.points import Point, on_curve_point, squared_distance
from rce.utils.log import get_logger

log = get_logger(__name__)


def hit_test_control_point(curve: Curve, pos: Point, radius: float) -> Optional[ControlPointId]:
    """Devuelve el punto de control bajo `pos` (o None).

    Entre los que caen dentro del radio gana el más cercano; a igual
    distancia gana el primero en orden start, mid, end. No es "primer match
    gana": con radio 8, arrastrar sobre mid a 3 px de start debe tomar mid.
    """
    limit = float(radius) * float(radius)
    best: Optional[ControlPointId] = None
    best_d = 0.0
    for cp, p in curve.control_points():
        d = squared_distance(pos, p)
        if d >= limit:
            continue
        if best is None or d < best_d:
            best = cp
            best_d = d
    return best


class CurveEditorController:
    """Interpreta pointer down/move/up y mantiene la superficie al día.

    Estados (derivados del store):
    - idle: sin punto pendiente ni curva.
    - awaiting_second_point: primer punto puesto; arrastrar muestra preview recto.
    - curve_editing: hay curva; arrastrar sobre un punto de control lo mueve.
    """

    def __init__(
        self,
        store: CurveStore,
        renderer: CurveRendererContract,
        *,
        marker_radius: float = DEFAULT_MARKER_RADIUS,
        on_state_changed: Callable[[EditorPhase], None] | None = None,
    ) -> None:
        self._store = store
        self._renderer = renderer
        self._hit_radius = float(marker_radius)
        self._on_state_changed = on_state_changed

        self._button_held = False
        # Punto pendiente creado por el press en curso (para reconocer su release).
        self._press_pending: Optional[Point] = None
        # El press en curso ya quedó resuelto (click degenerado o reset): su release no registra punto.
        self._release_absorbed = False

    @property
    def store(self) -> CurveStore:
        return self._store

    @property
    def button_held(self) -> bool:
        return self._button_held

    @property
    def hit_radius(self) -> float:
        return self._hit_radius

    # ------------------------------
    # Eventos de puntero
    # ------------------------------
    def pointer_down(self, pos: Point) -> None:
        phase0 = self._store.phase
        self._button_held = True
        self._press_pending = None
        self._release_absorbed = False
        self._register_point(pos, is_release=False)
        self._notify_if_changed(phase0)

    def pointer_up(self, pos: Point) -> None:
        phase0 = self._store.phase
        self._button_held = False
        if not self._release_absorbed:
            self._register_point(pos, is_release=True)
        self._press_pending = None
        self._release_absorbed = False
        self._notify_if_changed(phase0)

    def pointer_move(self, pos: Point) -> None:
        if not self._button_held:
            return

        state = self._store.state
        if isinstance(state, AwaitingSecondPoint):
            self._paint_preview(state.pending, pos)
        elif isinstance(state, CurveEditing):
            self._drag(state.curve, pos)

    def hit_test(self, pos: Point) -> Optional[ControlPointId]:
        curve = self._store.get_curve()
        if curve is None:
            return None
        return hit_test_control_point(curve, pos, self._hit_radius)

    # ------------------------------
    # Disparadores externos
    # ------------------------------
    def reset(self) -> None:
        """Borra la curva (y el punto pendiente) y deja solo el fondo."""
        phase0 = self._store.phase
        self._store.clear()
        self._press_pending = None
        if self._button_held:
            # Reset con el botón apretado: el release pertenece a un press anterior.
            self._button_held = False
            self._release_absorbed = True
        self._renderer.clear()
        self._renderer.draw_background()
        log.info("Curva borrada")
        self._notify_if_changed(phase0)

    def background_ready(self) -> None:
        """La imagen de fondo quedó disponible: redibuja el estado actual."""
        self.repaint()

    def repaint(self) -> None:
        state = self._store.state
        if isinstance(state, CurveEditing):
            self._paint_curve(state.curve, on_curve_marker=False)
            return
        self._renderer.clear()
        self._renderer.draw_background()
        if isinstance(state, AwaitingSecondPoint):
            self._renderer.draw_marker(state.pending, MarkerColor.GREEN)

    # ------------------------------
    # Internos
    # ------------------------------
    def _register_point(self, pos: Point, *, is_release: bool) -> None:
        state = self._store.state

        if isinstance(state, CurveEditing):
            return  # tope de una curva

        if not isinstance(state, AwaitingSecondPoint):
            self._store.set_pending_point(pos)
            if not is_release:
                self._press_pending = pos
            self._renderer.draw_marker(pos, MarkerColor.GREEN)
            log.debug("Primer punto en (%.1f, %.1f)", pos.x, pos.y)
            return

        pending = state.pending
        if is_release and self._press_pending is not None and self._press_pending == pending == pos:
            # Release del mismo click que puso el punto: no es un segundo click.
            return

        curve = self._store.commit_curve(pending, pos)
        if curve is None:
            self._store.clear_pending_point()
            if not is_release:
                self._release_absorbed = True
            log.debug("Click degenerado en (%.1f, %.1f): punto descartado", pos.x, pos.y)
            return

        self._paint_curve(curve, on_curve_marker=False)
        log.info(
            "Curva creada: start=%s mid=%s end=%s",
            curve.start.as_tuple(),
            curve.mid.as_tuple(),
            curve.end.as_tuple(),
        )

    def _drag(self, curve: Curve, pos: Point) -> None:
        target = hit_test_control_point(curve, pos, self._hit_radius)
        if target is None:
            return
        curve.move(target, pos)
        self._paint_curve(curve, on_curve_marker=True)

    def _paint_preview(self, pending: Point, pos: Point) -> None:
        # Preview recto: el control coincide con el extremo.
        r = self._renderer
        r.clear()
        r.draw_background()
        r.draw_curve(pending, pos, pos)
        r.draw_marker(pending, MarkerColor.GREEN)

    def _paint_curve(self, curve: Curve, *, on_curve_marker: bool) -> None:
        r = self._renderer
        r.clear()
        r.draw_background()
        r.draw_curve(curve.start, curve.mid, curve.end)
        for _cp, p in curve.control_points():
            r.draw_marker(p, MarkerColor.GREEN)
        if on_curve_marker:
            r.draw_marker(on_curve_point(curve.start, curve.mid, curve.end), MarkerColor.GOLD)

    def _notify_if_changed(self, phase0: EditorPhase) -> None:
        phase = self._store.phase
        if phase == phase0:
            return
        log.debug("Fase: %s -> %s", phase0.value, phase.value)
        if self._on_state_changed is not None:
            self._on_state_changed(phase)
