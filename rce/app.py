# File: rce/app.py
# Project: RusticCurveEditor (RCE)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point de la aplicación.
# Notes: Logging + project settings antes de crear la ventana.
from __future__ import annotations

import sys
from PySide6.QtWidgets import QApplication

from rce.core.settings import apply_project_settings
from rce.core.version import APP_VERSION

from rce.ui.main_window import MainWindow
from rce.utils.log import setup_logging, get_logger

log = get_logger(__name__)


def main() -> int:
    setup_logging()
    # Project-level defaults (repo-local): rce_settings.json -> env vars
    apply_project_settings(logger=log, prefer_env=True)
    app = QApplication(sys.argv)
    w = MainWindow()
    w.show()
    log.info("RCE iniciado (v%s)", APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
