# File: rce/geom/points.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Punto 2D y helpers puros (punto medio, punto sobre la curva, escalas).
# Notes: Sin Qt. Todo en coordenadas de superficie (px del backing store).
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Punto en coordenadas de superficie.

    Inmutable: la curva reasigna sus campos en vez de mutar el punto.
    """

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def on_curve_point(start: Point, mid: Point, end: Point) -> Point:
    """Punto de la curva en t=0.5 (de Casteljau con `mid` como control).

    Solo se usa para el marcador dorado; no forma parte del modelo.
    """
    return midpoint(midpoint(start, mid), midpoint(mid, end))


def squared_distance(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def fit_scale(src_w: float, src_h: float, dst_w: float, dst_h: float) -> float:
    """Escala que entra `src` en `dst` manteniendo aspecto (mínimo de ratios).

    Devuelve 0.0 si el origen está vacío (nada que dibujar).
    """
    if src_w <= 0 or src_h <= 0:
        return 0.0
    return min(float(dst_w) / float(src_w), float(dst_h) / float(src_h))


def widget_to_surface(
    x: float,
    y: float,
    widget_w: float,
    widget_h: float,
    surface_w: float,
    surface_h: float,
) -> Point:
    """Convierte una posición del widget a px del backing store.

    El widget puede mostrarse estirado respecto de la superficie; cada eje
    se escala por separado. Un widget de tamaño 0 mapea con escala 1.
    """
    sx = (float(surface_w) / float(widget_w)) if widget_w > 0 else 1.0
    sy = (float(surface_h) / float(widget_h)) if widget_h > 0 else 1.0
    return Point(float(x) * sx, float(y) * sy)
