# File: rce/core/curve_store.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Dueño único de la curva (0 o 1) y del punto pendiente.
# Notes: El estado es explícito (Idle / AwaitingSecondPoint / CurveEditing).
from __future__ import annotations

from typing import Optional

from rce.core.models import (
    AwaitingSecondPoint,
    Curve,
    CurveEditing,
    EditorPhase,
    EditorState,
    Idle,
)
from rce.geom.points import Point, midpoint
from rce.utils.errors import RceStateError
from rce.utils.log import get_logger

log = get_logger(__name__)


class CurveStore:
    """Guarda como máximo una curva y el primer punto de una curva en curso."""

    def __init__(self) -> None:
        self._state: EditorState = Idle()

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def phase(self) -> EditorPhase:
        return self._state.phase

    # ------------------------------
    # Punto pendiente
    # ------------------------------
    def has_pending_point(self) -> bool:
        return isinstance(self._state, AwaitingSecondPoint)

    def pending_point(self) -> Optional[Point]:
        if isinstance(self._state, AwaitingSecondPoint):
            return self._state.pending
        return None

    def set_pending_point(self, p: Point) -> None:
        """Registra el primer punto. Solo válido en Idle (el caller chequea antes)."""
        if not isinstance(self._state, Idle):
            raise RceStateError(f"set_pending_point en fase {self.phase.value!r}")
        self._state = AwaitingSecondPoint(pending=p)

    def clear_pending_point(self) -> None:
        if isinstance(self._state, AwaitingSecondPoint):
            self._state = Idle()

    # ------------------------------
    # Curva
    # ------------------------------
    def commit_curve(self, start: Point, end: Point) -> Optional[Curve]:
        """Crea la curva (mid = punto medio) si no hay otra y no es degenerada.

        - Ya existe una curva: None, sin tocar nada (tope de 1).
        - start == end: None, no se guarda nada (click simple).
        """
        if isinstance(self._state, CurveEditing):
            log.debug("commit_curve ignorado: ya hay una curva")
            return None
        if start.x == end.x and start.y == end.y:
            log.debug("commit_curve ignorado: punto degenerado %s", start)
            return None

        curve = Curve(start=start, mid=midpoint(start, end), end=end)
        self._state = CurveEditing(curve=curve)
        return curve

    def get_curve(self) -> Optional[Curve]:
        if isinstance(self._state, CurveEditing):
            return self._state.curve
        return None

    def clear(self) -> None:
        self._state = Idle()
