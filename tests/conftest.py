"""pytest: configuración de runtime.

El paquete `rce` vive en la raíz del repo (layout plano, sin __init__.py en
la raíz del paquete). Para poder correr `python -m pytest` sin instalar, se
agrega la raíz del repo a sys.path. Los tests de Qt corren sin display.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path


def _ensure_repo_root_on_syspath() -> None:
    repo_root = str(Path(__file__).resolve().parents[1])
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)


_ensure_repo_root_on_syspath()
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
