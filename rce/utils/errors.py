# File: rce/utils/errors.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: La edición de la curva nunca lanza por input del usuario; estos errores
#        son para contratos rotos (programación) y E/S del host.
from __future__ import annotations


class RceError(Exception):
    """Error base del proyecto."""


class RceValidationError(RceError):
    """Error de validación (valor de settings/argumento imposible de coercionar)."""


class RceStateError(RceError):
    """Operación del store llamada fuera del estado que la permite."""


class RceIOError(RceError):
    """Error de E/S (lectura de la imagen de fondo, etc.)."""
