# File: rce/core/renderer.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Contrato mínimo de dibujo que consume el controlador.
# Notes: El controlador no conoce Qt; la implementación raster está en rce.ui.surface_renderer.
from __future__ import annotations

from enum import Enum

from rce.geom.points import Point


class MarkerColor(str, Enum):
    """Color semántico del marcador.

    - green: punto de control puesto por el usuario.
    - gold: punto medio derivado sobre la curva.
    """

    GREEN = "green"
    GOLD = "gold"


class CurveRendererContract:
    """Contrato mínimo de la superficie de dibujo.

    Las implementaciones por defecto no dibujan nada; sirve como renderer
    "headless" y para que la superficie real no conozca al controlador.
    """

    def clear(self) -> None:
        return

    def draw_background(self) -> None:
        """Imagen de fondo escalada (aspecto preservado). No-op si no está lista."""
        return

    def draw_curve(self, p0: Point, ctrl: Point, p1: Point) -> None:
        _ = (p0, ctrl, p1)
        return

    def draw_marker(self, p: Point, color: MarkerColor) -> None:
        _ = (p, color)
        return
