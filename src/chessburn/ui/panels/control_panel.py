"""ControlPanel: navigation and timeline action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget


class ControlPanel(QWidget):
    """Buttons for start/back/forward/latest navigation, undo and reset."""

    start_clicked = pyqtSignal()
    back_clicked = pyqtSignal()
    forward_clicked = pyqtSignal()
    latest_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _button(self, text: str, tooltip: str) -> QPushButton:
        btn = QPushButton(text)
        btn.setFont(QFont("Adwaita Sans", 10))
        btn.setMinimumHeight(36)
        btn.setToolTip(tooltip)
        return btn

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        row1 = QHBoxLayout()
        self._btn_start = self._button("⏮", "Go to start")
        self._btn_start.clicked.connect(self.start_clicked)
        row1.addWidget(self._btn_start)

        self._btn_back = self._button("◀", "Step back")
        self._btn_back.clicked.connect(self.back_clicked)
        row1.addWidget(self._btn_back)

        self._btn_forward = self._button("▶", "Step forward")
        self._btn_forward.clicked.connect(self.forward_clicked)
        row1.addWidget(self._btn_forward)

        self._btn_latest = self._button("⏭", "Go to latest")
        self._btn_latest.clicked.connect(self.latest_clicked)
        row1.addWidget(self._btn_latest)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self._btn_undo = self._button("Undo", "Remove the last move")
        self._btn_undo.clicked.connect(self.undo_clicked)
        row2.addWidget(self._btn_undo)

        self._btn_reset = self._button("Reset", "Back to the initial position")
        self._btn_reset.setStyleSheet(
            "QPushButton { background-color: #6b2020; }"
            "QPushButton:hover { background-color: #8b2020; }"
        )
        self._btn_reset.clicked.connect(self.reset_clicked)
        row2.addWidget(self._btn_reset)
        layout.addLayout(row2)

    def set_navigation_state(
        self,
        *,
        can_step_back: bool,
        can_step_forward: bool,
        has_moves: bool,
    ) -> None:
        """Enable/disable buttons based on the timeline cursor."""
        self._btn_start.setEnabled(can_step_back)
        self._btn_back.setEnabled(can_step_back)
        self._btn_forward.setEnabled(can_step_forward)
        self._btn_latest.setEnabled(can_step_forward)
        self._btn_undo.setEnabled(has_moves)
