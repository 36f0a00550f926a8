# widgets.py
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QInputDialog,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from prompts import Prompter


class StatusPill(QLabel):
    """
    Compact fixed-width status indicator for the combined sink.
    Details go in tooltip.
    """
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedWidth(110)
        self.set_state("absent")

    def set_state(self, state: str) -> None:
        # state: present | absent | error
        if state == "present":
            text, bg, bd, fg = "Combined", "#233a2c", "#2f6b45", "#cfeedd"
        elif state == "error":
            text, bg, bd, fg = "Error", "#3a2424", "#7a3131", "#f3c8c8"
        else:
            text, bg, bd, fg = "No sink", "#2a2a30", "#3a3a42", "#d6d6d6"

        self.setText(text)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {bg};
                border: 1px solid {bd};
                border-radius: 10px;
                padding: 4px 8px;
                color: {fg};
                font-weight: 600;
            }}
            """
        )


class SinkChecklistDialog(QDialog):
    """Multi-select list of sink descriptions with checkable rows."""

    def __init__(self, prompt: str, options: Sequence[str], parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle(prompt)
        self.resize(420, 360)

        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)
        self.setLayout(layout)

        title = QLabel(prompt)
        title.setObjectName("Title")
        layout.addWidget(title)

        self.list = QListWidget()
        for opt in options:
            item = QListWidgetItem(opt)
            item.setFlags(item.flags() | Qt.ItemIsUserCheckable)
            item.setCheckState(Qt.Unchecked)
            self.list.addItem(item)
        layout.addWidget(self.list, 1)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def checked_rows(self) -> List[int]:
        return [i for i in range(self.list.count()) if self.list.item(i).checkState() == Qt.Checked]


class VolumeDialog(QDialog):
    """Spin box bounded to 0..100; out-of-range input cannot be accepted."""

    def __init__(self, label: str, default: int, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Slave volume")

        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)
        self.setLayout(layout)

        layout.addWidget(QLabel(label))

        self.spin = QSpinBox()
        self.spin.setRange(0, 100)
        self.spin.setSuffix(" %")
        self.spin.setValue(min(max(int(default), 0), 100))
        layout.addWidget(self.spin)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok)
        buttons.accepted.connect(self.accept)
        layout.addWidget(buttons)

    def value(self) -> int:
        return int(self.spin.value())


class QtPrompter(Prompter):
    """Prompter backed by modal dialogs parented to ``parent``."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        status: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._parent = parent
        self._status = status

    def choose(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        item, ok = QInputDialog.getItem(self._parent, prompt, prompt, list(options), default, False)
        if not ok:
            return default
        return list(options).index(item)

    def select_many(self, prompt: str, options: Sequence[str]) -> List[int]:
        dlg = SinkChecklistDialog(prompt, options, self._parent)
        if not dlg.exec():
            return []
        return dlg.checked_rows()

    def ask_volume(self, label: str, default: int) -> int:
        dlg = VolumeDialog(label, default, self._parent)
        if not dlg.exec():
            return int(default)
        return dlg.value()

    def notify(self, message: str) -> None:
        if self._status is not None:
            self._status(message)
