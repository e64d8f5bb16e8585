from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QIcon

import sys
import os

from chaosgame import config

ORG_ID = "chaosgame"
APP_ID = "chaos-game"

VISIBLE_APP_NAME = "Chaos Game: Sierpinski"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)
    if os.path.exists(config.APP_ICON_PATH):
        app.setWindowIcon(QIcon(config.APP_ICON_PATH))

    return app
