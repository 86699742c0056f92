"""MovePanel: numbered move pairs; clicking a move jumps to its ply."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from chessburn.core.models import MovePair
from chessburn.core.notation import figurine_san


class MovePanel(QWidget):
    """Displays the timeline's history as numbered pairs."""

    # Emits the ply reached after the clicked move (1-based).
    move_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._pairs: list[MovePair] = []
        self._move_buttons: dict[int, QToolButton] = {}
        self._current_ply = 0
        self._use_figurine_notation = True
        self._white_first = True
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("AdwaitaMono Nerd Font", 12))
        layout.addWidget(self._list)

        self._empty_label = QLabel("No moves yet.")
        self._empty_label.setStyleSheet("color: #777;")
        layout.addWidget(self._empty_label)

    @property
    def current_ply(self) -> int:
        return self._current_ply

    def clear(self) -> None:
        self._pairs = []
        self._move_buttons.clear()
        self._current_ply = 0
        self._list.clear()
        self._empty_label.setVisible(True)

    def _create_move_button(self, text: str, ply: int) -> QToolButton:
        btn = QToolButton()
        btn.setText(text)
        btn.setToolTip(f"Jump to ply {ply}")
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn.setProperty("activeMove", False)
        btn.setStyleSheet(
            """
            QToolButton {
                background: transparent;
                color: #d4d4d4;
                border: 1px solid transparent;
                border-radius: 4px;
                padding: 2px 8px;
                text-align: left;
                font-size: 13px;
            }
            QToolButton:hover {
                background: #3c3c3c;
                border-color: #555;
            }
            QToolButton[activeMove="true"] {
                background: #333;
                border-color: #3b79b7;
                color: #f0f6ff;
            }
            """
        )
        btn.clicked.connect(
            lambda _checked=False, move_ply=ply: self._on_move_clicked(move_ply)
        )
        return btn

    def set_current_ply(self, ply: int) -> None:
        """Highlight the move that produced *ply*; ply 0 highlights nothing."""
        self._current_ply = ply
        for move_ply, btn in self._move_buttons.items():
            btn.setProperty("activeMove", move_ply == ply)
            style = btn.style()
            if style is not None:
                style.unpolish(btn)
                style.polish(btn)
            btn.update()

    def _on_move_clicked(self, ply: int) -> None:
        self.move_clicked.emit(ply)

    def set_use_figurine_notation(self, enabled: bool) -> None:
        """Toggle move text style between figurines and standard SAN letters."""
        if self._use_figurine_notation == enabled:
            return
        self._use_figurine_notation = enabled
        self._rebuild_list()

    def _format_san(self, san: str, white: bool) -> str:
        if self._use_figurine_notation:
            return figurine_san(san, white)
        return san

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_buttons.clear()
        for pair in self._pairs:
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{pair.number}.")
            num_label.setFixedWidth(36)
            num_label.setStyleSheet("color: #aaa;")
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            for san, ply, white in (
                (pair.first, pair.first_ply, self._white_first),
                (pair.second, pair.second_ply, not self._white_first),
            ):
                if san is None:
                    spacer = QWidget()
                    spacer.setSizePolicy(
                        QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                    )
                    row_layout.addWidget(spacer, 1)
                    continue
                btn = self._create_move_button(self._format_san(san, white), ply)
                row_layout.addWidget(btn, 1)
                self._move_buttons[ply] = btn

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

        self._empty_label.setVisible(not self._pairs)
        self.set_current_ply(self._current_ply)
        active = self._move_buttons.get(self._current_ply)
        if active is not None:
            self._list.scrollToItem(self._list.item((self._current_ply - 1) // 2))

    def set_pairs(
        self,
        pairs: list[MovePair],
        current_ply: int,
        white_first: bool = True,
    ) -> None:
        """Rebuild the move list, or only move the highlight if rows are unchanged."""
        if pairs == self._pairs and white_first == self._white_first and pairs:
            self.set_current_ply(current_ply)
            return
        self._pairs = list(pairs)
        self._white_first = white_first
        self._current_ply = current_ply
        self._rebuild_list()
