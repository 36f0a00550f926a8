# theme.py
from __future__ import annotations

from PySide6.QtGui import QPalette, QColor
from PySide6.QtWidgets import QApplication


def apply_dark_theme(app: QApplication) -> None:
    app.setStyle("Fusion")

    pal = QPalette()
    for role, rgb in (
        (QPalette.Window, (20, 20, 22)),
        (QPalette.WindowText, (230, 230, 230)),
        (QPalette.Base, (14, 14, 16)),
        (QPalette.AlternateBase, (26, 26, 28)),
        (QPalette.Text, (230, 230, 230)),
        (QPalette.Button, (34, 34, 38)),
        (QPalette.ButtonText, (230, 230, 230)),
        (QPalette.Highlight, (80, 110, 170)),
        (QPalette.HighlightedText, (255, 255, 255)),
    ):
        pal.setColor(role, QColor(*rgb))
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        pal.setColor(QPalette.Disabled, role, QColor(140, 140, 140))
    app.setPalette(pal)

    app.setStyleSheet(
        """
        QMainWindow, QDialog { background: #141416; }

        QLabel#Title {
            font-size: 16px;
            font-weight: 650;
        }

        QLabel#Status { color: #aeb3bc; }

        QFrame#Panel {
            background: #1b1b1f;
            border: 1px solid #2a2a30;
            border-radius: 10px;
        }

        QListWidget, QSpinBox {
            padding: 4px 8px;
            border-radius: 8px;
            border: 1px solid #2a2a30;
            background: #121216;
        }

        QPushButton {
            padding: 8px 12px;
            border-radius: 10px;
            border: 1px solid #2a2a30;
            background: #232329;
        }
        QPushButton:hover { background: #2a2a33; }

        QPushButton#Primary {
            background: #2c3a5a;
            border: 1px solid #3b4f7a;
        }
        QPushButton#Primary:hover { background: #34456c; }

        /* unload-module of the combined sink */
        QPushButton#Danger {
            background: #3a2424;
            border: 1px solid #7a3131;
        }
        QPushButton#Danger:hover { background: #442b2b; }
        """
    )
