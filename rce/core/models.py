# File: rce/core/models.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Modelo en memoria: curva (start/mid/end) y estados explícitos del editor.
# Notes: Nada se serializa; el modelo vive lo que dura la sesión.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator, Union

from rce.geom.points import Point


class ControlPointId(str, Enum):
    """Identidad de un punto de control.

    El orden de declaración es el orden de creación (y de desempate en hit-test).
    """

    START = "start"
    MID = "mid"
    END = "end"


class EditorPhase(str, Enum):
    IDLE = "idle"
    AWAITING_SECOND_POINT = "awaiting_second_point"
    CURVE_EDITING = "curve_editing"


@dataclass
class Curve:
    start: Point
    mid: Point
    end: Point

    def get(self, cp: ControlPointId) -> Point:
        if cp is ControlPointId.START:
            return self.start
        if cp is ControlPointId.MID:
            return self.mid
        if cp is ControlPointId.END:
            return self.end
        raise ValueError(f"ControlPointId inválido: {cp!r}")

    def move(self, cp: ControlPointId, pos: Point) -> None:
        """Reasigna el punto `cp` (mutación in-place, la curva no se reemplaza)."""
        if cp is ControlPointId.START:
            self.start = pos
        elif cp is ControlPointId.MID:
            self.mid = pos
        elif cp is ControlPointId.END:
            self.end = pos
        else:
            raise ValueError(f"ControlPointId inválido: {cp!r}")

    def control_points(self) -> Iterator[tuple[ControlPointId, Point]]:
        for cp in ControlPointId:
            yield cp, self.get(cp)


# ------------------------------
# Estados del editor
# ------------------------------
# Un punto pendiente y una curva nunca conviven: cada estado guarda solo lo suyo.


@dataclass(frozen=True)
class Idle:
    phase: ClassVar[EditorPhase] = EditorPhase.IDLE


@dataclass(frozen=True)
class AwaitingSecondPoint:
    pending: Point
    phase: ClassVar[EditorPhase] = EditorPhase.AWAITING_SECOND_POINT


@dataclass(frozen=True)
class CurveEditing:
    # frozen solo bloquea reasignar `curve`; la curva en sí es mutable.
    curve: Curve
    phase: ClassVar[EditorPhase] = EditorPhase.CURVE_EDITING


EditorState = Union[Idle, AwaitingSecondPoint, CurveEditing]
