# File: rce/core/settings.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Preferencias de usuario (JSON) + defaults por proyecto (rce_settings.json -> env).
# Notes: No depende de Qt; guarda en ~/.rce/settings.json. La curva nunca se persiste.
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rce.core.version import DEFAULT_BACKGROUND_IMAGE, DEFAULT_MARKER_RADIUS, DEFAULT_SURFACE_SIZE
from rce.utils.errors import RceValidationError

log = logging.getLogger(__name__)


def settings_dir() -> Path:
    """Carpeta de settings del usuario (ruta simple, sin Qt)."""
    return Path.home() / ".rce"


def settings_path() -> Path:
    return settings_dir() / "settings.json"


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Defaults reproducibles por proyecto sin tocar el código.
# Archivo esperado: rce_settings.json en el CWD o en alguno de sus padres.
PROJECT_SETTINGS_FILENAME = "rce_settings.json"

VALID_CANVAS_THEMES = ("dark", "mid", "light")

MARKER_RADIUS_RANGE = (2, 64)
SURFACE_SIDE_RANGE = (64, 8192)


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rce_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga rce_settings.json (si existe) y lo vuelca a variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve los valores aplicados desde el JSON (útil para logging).
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("Formato inválido en %s (se esperaba objeto JSON)", p)
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    bg = _deep_get(data, "canvas.background_image")
    if isinstance(bg, str) and bg.strip():
        # Rutas relativas al archivo de settings (no al CWD).
        bg_path = Path(bg.strip())
        if not bg_path.is_absolute():
            bg_path = p.parent / bg_path
        applied["canvas.background_image"] = str(bg_path)
        _set_env("RCE_BACKGROUND_IMAGE", bg_path)

    radius = _deep_get(data, "canvas.marker_radius")
    if isinstance(radius, int) and MARKER_RADIUS_RANGE[0] <= radius <= MARKER_RADIUS_RANGE[1]:
        applied["canvas.marker_radius"] = radius
        _set_env("RCE_MARKER_RADIUS", radius)

    size = _deep_get(data, "canvas.surface_size")
    if isinstance(size, (list, tuple)) and len(size) == 2:
        try:
            w = _coerce_int_strict(size[0], *SURFACE_SIDE_RANGE)
            h = _coerce_int_strict(size[1], *SURFACE_SIDE_RANGE)
        except RceValidationError as e:
            _log.warning("canvas.surface_size ignorado: %s", e)
        else:
            applied["canvas.surface_size"] = [w, h]
            _set_env("RCE_SURFACE_SIZE", f"{w}x{h}")

    theme = _deep_get(data, "canvas.theme")
    if isinstance(theme, str):
        theme = theme.strip().lower()
        if theme in VALID_CANVAS_THEMES:
            applied["canvas.theme"] = theme
            _set_env("RCE_CANVAS_THEME", theme)

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


@dataclass
class AppSettings:
    """Preferencias persistentes del usuario."""

    # Imagen de fondo ("" = usar DEFAULT_BACKGROUND_IMAGE si existe).
    background_image: str = ""

    # Radio del marcador (= radio de hit-test), en px de superficie.
    marker_radius: int = DEFAULT_MARKER_RADIUS

    # Backing store de la superficie (px).
    surface_w: int = DEFAULT_SURFACE_SIZE[0]
    surface_h: int = DEFAULT_SURFACE_SIZE[1]

    canvas_theme: str = "dark"

    # Geometría de la ventana (base64 de QByteArray, sin depender de Qt acá).
    ui_main_geometry_b64: str = ""

    @classmethod
    def load(cls) -> "AppSettings":
        """Carga desde disco (tolerante a errores) y aplica overrides de env."""
        out = cls()
        p = settings_path()
        try:
            if p.exists():
                data = json.loads(p.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    out.background_image = str(data.get("background_image", "") or "")
                    out.marker_radius = _coerce_int(data.get("marker_radius"), *MARKER_RADIUS_RANGE, out.marker_radius)
                    out.surface_w = _coerce_int(data.get("surface_w"), *SURFACE_SIDE_RANGE, out.surface_w)
                    out.surface_h = _coerce_int(data.get("surface_h"), *SURFACE_SIDE_RANGE, out.surface_h)
                    out.canvas_theme = _coerce_canvas_theme(data.get("canvas_theme", out.canvas_theme))
                    out.ui_main_geometry_b64 = str(data.get("ui_main_geometry_b64", "") or "")
        except Exception:
            log.debug("No se pudieron cargar settings: %s", p, exc_info=True)
            out = cls()
        out.apply_env_overrides()
        return out

    def apply_env_overrides(self) -> None:
        """Las env vars (manuales o de rce_settings.json) ganan sobre settings.json."""
        bg = (os.environ.get("RCE_BACKGROUND_IMAGE") or "").strip()
        if bg:
            self.background_image = bg

        raw_radius = os.environ.get("RCE_MARKER_RADIUS")
        if raw_radius:
            self.marker_radius = _coerce_int(raw_radius, *MARKER_RADIUS_RANGE, self.marker_radius)

        raw_size = (os.environ.get("RCE_SURFACE_SIZE") or "").strip().lower()
        if raw_size:
            try:
                self.surface_w, self.surface_h = parse_surface_size(raw_size)
            except RceValidationError as e:
                log.warning("RCE_SURFACE_SIZE ignorado: %s", e)

        theme = os.environ.get("RCE_CANVAS_THEME")
        if theme:
            self.canvas_theme = _coerce_canvas_theme(theme)

    def resolved_background_image(self) -> Path | None:
        """Ruta de la imagen de fondo a cargar, o None si no hay ninguna disponible."""
        if self.background_image:
            return Path(self.background_image)
        p = Path(DEFAULT_BACKGROUND_IMAGE)
        return p if p.is_file() else None

    def save(self) -> None:
        """Guarda en disco (no debe romper la app)."""
        try:
            settings_dir().mkdir(parents=True, exist_ok=True)
            payload: Dict[str, Any] = {
                "schema_version": 1,
                "background_image": str(self.background_image or ""),
                "marker_radius": _coerce_int(self.marker_radius, *MARKER_RADIUS_RANGE, DEFAULT_MARKER_RADIUS),
                "surface_w": _coerce_int(self.surface_w, *SURFACE_SIDE_RANGE, DEFAULT_SURFACE_SIZE[0]),
                "surface_h": _coerce_int(self.surface_h, *SURFACE_SIDE_RANGE, DEFAULT_SURFACE_SIZE[1]),
                "canvas_theme": _coerce_canvas_theme(self.canvas_theme),
                "ui_main_geometry_b64": str(self.ui_main_geometry_b64 or ""),
            }
            settings_path().write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except Exception:
            log.debug("No se pudieron guardar settings", exc_info=True)


def parse_surface_size(raw: str) -> tuple[int, int]:
    """Parsea "800x600" -> (800, 600). Lanza RceValidationError si no se puede."""
    s = str(raw or "").strip().lower().replace(" ", "")
    if "x" not in s:
        raise RceValidationError(f"tamaño inválido: {raw!r} (esperado WxH)")
    a, b = s.split("x", 1)
    return (
        _coerce_int_strict(a, *SURFACE_SIDE_RANGE),
        _coerce_int_strict(b, *SURFACE_SIDE_RANGE),
    )


def _coerce_canvas_theme(v: Any) -> str:
    s = str(v or "").strip().lower()
    if s in VALID_CANVAS_THEMES:
        return s
    return "dark"


def _coerce_int(v: Any, min_v: int, max_v: int, default: int) -> int:
    try:
        n = int(v)
        if n < min_v:
            return min_v
        if n > max_v:
            return max_v
        return n
    except Exception:
        return int(default)


def _coerce_int_strict(v: Any, min_v: int, max_v: int) -> int:
    try:
        n = int(v)
    except (TypeError, ValueError):
        raise RceValidationError(f"entero inválido: {v!r}") from None
    if not (min_v <= n <= max_v):
        raise RceValidationError(f"{n} fuera de rango [{min_v}, {max_v}]")
    return n
