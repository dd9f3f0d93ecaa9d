from __future__ import annotations

import os
import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

import pyqtgraph as pg

from pahvapor.config import ORG_ID, APP_ID, VISIBLE_APP_NAME

PLOT_BACKGROUND = "#080b14"
PLOT_FOREGROUND = "#aaaaaa"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(QCoreApplication.translate("App", VISIBLE_APP_NAME))

    # Must be set before any PlotWidget is created
    pg.setConfigOption("background", PLOT_BACKGROUND)
    pg.setConfigOption("foreground", PLOT_FOREGROUND)
    pg.setConfigOptions(antialias=True)

    return app
