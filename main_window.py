# main_window.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QMessageBox,
    QFrame,
    QSizePolicy,
)

from app_meta import APP_NAME, detect_version
from backend import CombinedSinkBackend
from errors import CombineError
from pactl_cli import PactlClient
from widgets import QtPrompter, StatusPill


log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, pactl: Optional[PactlClient] = None) -> None:
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} {detect_version()}")
        self.resize(460, 300)

        root = QWidget()
        outer = QVBoxLayout()
        outer.setContentsMargins(12, 12, 12, 12)
        outer.setSpacing(10)
        root.setLayout(outer)
        self.setCentralWidget(root)

        self.status = QLabel("")
        self.status.setObjectName("Status")
        self.status.setWordWrap(True)

        self.backend = CombinedSinkBackend(QtPrompter(self, status=self.status.setText), pactl)

        header = QHBoxLayout()
        header.setSpacing(10)

        title = QLabel(APP_NAME)
        title.setObjectName("Title")

        self.server = QLabel(self.backend.server_label())
        self.server.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

        refresh_btn = QPushButton("Refresh")
        refresh_btn.clicked.connect(self.refresh_status)

        header.addWidget(title)
        header.addSpacing(8)
        header.addWidget(self.server, 2)
        header.addStretch(1)
        header.addWidget(refresh_btn)
        outer.addLayout(header)

        outer.addWidget(self._make_actions_panel(), 1)
        outer.addWidget(self.status)

        self.refresh_status()

    def _make_actions_panel(self) -> QFrame:
        frame = QFrame()
        frame.setObjectName("Panel")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)
        frame.setLayout(layout)

        top = QHBoxLayout()
        h = QLabel("What to do?")
        f = QFont()
        f.setPointSize(12)
        f.setWeight(QFont.DemiBold)
        h.setFont(f)
        self.pill = StatusPill()
        top.addWidget(h)
        top.addStretch(1)
        top.addWidget(self.pill)
        layout.addLayout(top)

        self.create_btn = QPushButton("Create combined sink")
        self.create_btn.setObjectName("Primary")
        self.create_btn.clicked.connect(self.create_combined)

        self.volume_btn = QPushButton("Change volume of slave devices")
        self.volume_btn.clicked.connect(self.change_volumes)

        self.remove_btn = QPushButton("Remove combined sink")
        self.remove_btn.setObjectName("Danger")
        self.remove_btn.clicked.connect(self.remove_combined)

        for b in (self.create_btn, self.volume_btn, self.remove_btn):
            layout.addWidget(b)
        layout.addStretch(1)
        return frame

    def refresh_status(self) -> None:
        try:
            present = self.backend.combined_exists()
        except CombineError as e:
            log.error("refresh failed: %s", e)
            self.pill.set_state("error")
            self.pill.setToolTip(str(e))
            self.volume_btn.setEnabled(False)
            self.remove_btn.setEnabled(False)
            return

        self.pill.set_state("present" if present else "absent")
        self.pill.setToolTip(
            f"A sink named \"{self.backend.SINK_NAME}\" is loaded."
            if present
            else f"No sink named \"{self.backend.SINK_NAME}\"."
        )
        self.volume_btn.setEnabled(present)
        self.remove_btn.setEnabled(present)

    def _run(self, title: str, op: Callable[[], Optional[str]]) -> None:
        try:
            msg = op()
        except CombineError as e:
            log.error("%s failed: %s", title, e)
            QMessageBox.critical(self, title, str(e))
        else:
            if msg:
                self.status.setText(msg)
        self.refresh_status()

    def create_combined(self) -> None:
        def op() -> Optional[str]:
            slaves = self.backend.create()
            if slaves is None:
                return "Nothing selected."
            return "Successfully created combined sink!"

        self._run("Create combined sink", op)

    def change_volumes(self) -> None:
        def op() -> Optional[str]:
            changes = self.backend.adjust_volumes()
            if not changes:
                return "No volume changed."
            return "Changed: " + ", ".join(f"{c.sink_name} {c.new}%" for c in changes)

        self._run("Change volume", op)

    def remove_combined(self) -> None:
        def op() -> Optional[str]:
            self.backend.remove()
            return "Successfully removed combined sink!"

        self._run("Remove combined sink", op)
