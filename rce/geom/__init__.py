"""Geometry helpers.

This package is intentionally small and dependency-free (no Qt): points,
midpoints and the coordinate mapping used by the drawing surface.
"""

from __future__ import annotations

from rce.geom.points import (
    Point,
    fit_scale,
    midpoint,
    on_curve_point,
    squared_distance,
    widget_to_surface,
)

__all__ = [
    "Point",
    "fit_scale",
    "midpoint",
    "on_curve_point",
    "squared_distance",
    "widget_to_surface",
]
