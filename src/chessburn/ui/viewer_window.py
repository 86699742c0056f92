"""ViewerWindow: top-level window wiring the session to its panels."""

from __future__ import annotations

import logging
import re

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chessburn.core.errors import MalformedPositionError, NavigationOutOfRangeError
from chessburn.core.models import SquarePair
from chessburn.core.notation import white_moves_first
from chessburn.game.session import ImportReport, ViewerSession
from chessburn.game.timeline import Timeline
from chessburn.settings import ViewerSettings
from chessburn.ui.panels.control_panel import ControlPanel
from chessburn.ui.panels.move_panel import MovePanel

_LOGGER = logging.getLogger(__name__)
_SQUARE_MOVE_RE = re.compile(r"^([a-h][1-8])-?([a-h][1-8])([qrbnQRBN])?$")
_ERROR_STYLE = "color: #c62828;"


def parse_move_input(text: str) -> str | SquarePair:
    """``e2e4``/``e7e8q`` become a SquarePair, anything else stays SAN."""
    text = text.strip()
    match = _SQUARE_MOVE_RE.match(text)
    if match is None:
        return text
    from_sq, to_sq, promo = match.groups()
    return SquarePair(from_sq, to_sq, promo.lower() if promo else None)


class ViewerWindow(QMainWindow):
    """Main application window for Chessburn."""

    def __init__(
        self,
        session: ViewerSession | None = None,
        settings: ViewerSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chessburn")
        self.setMinimumSize(760, 560)

        self._session = session or ViewerSession(settings=settings)
        self._last_report: ImportReport | None = None

        self._setup_ui()
        self._connect_signals()
        self._session.timeline.events.on_changed.append(self._on_timeline_changed)
        self._move_panel.set_use_figurine_notation(
            self._session.settings.use_figurine_notation
        )
        self._refresh()

    @property
    def session(self) -> ViewerSession:
        return self._session

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(16)

        # Position readout and loaders (left)
        left = QVBoxLayout()
        left.setSpacing(6)

        mono = QFont("AdwaitaMono Nerd Font", 11)
        self._fen_label = QLabel()
        self._fen_label.setFont(mono)
        self._fen_label.setWordWrap(True)
        left.addWidget(self._fen_label)

        self._last_move_label = QLabel()
        left.addWidget(self._last_move_label)

        play_row = QHBoxLayout()
        self._move_input = QLineEdit()
        self._move_input.setPlaceholderText("Move (SAN or e2e4) and press Enter")
        play_row.addWidget(self._move_input, 1)
        self._btn_play = QPushButton("Play")
        play_row.addWidget(self._btn_play)
        left.addLayout(play_row)

        left.addWidget(QLabel("FEN Loader"))
        self._fen_input = QLineEdit()
        self._fen_input.setFont(mono)
        self._fen_input.setPlaceholderText(
            "Paste a 6-field FEN and press Enter or Load"
        )
        left.addWidget(self._fen_input)

        fen_buttons = QHBoxLayout()
        self._btn_load_fen = QPushButton("Load FEN")
        self._btn_start_fen = QPushButton("Start FEN")
        self._btn_random_fen = QPushButton("Random test FEN")
        for btn in (self._btn_load_fen, self._btn_start_fen, self._btn_random_fen):
            fen_buttons.addWidget(btn)
        left.addLayout(fen_buttons)

        self._loaded_label = QLabel()
        left.addWidget(self._loaded_label)
        self._fen_error = QLabel()
        self._fen_error.setStyleSheet(_ERROR_STYLE)
        self._fen_error.setWordWrap(True)
        left.addWidget(self._fen_error)

        left.addWidget(QLabel("Import game"))
        self._pgn_input = QPlainTextEdit()
        self._pgn_input.setFont(mono)
        self._pgn_input.setPlaceholderText("Paste PGN or movetext")
        left.addWidget(self._pgn_input, 1)

        import_buttons = QHBoxLayout()
        self._btn_import = QPushButton("Import")
        self._btn_keep_partial = QPushButton("Keep valid moves")
        self._btn_keep_partial.setVisible(False)
        import_buttons.addWidget(self._btn_import)
        import_buttons.addWidget(self._btn_keep_partial)
        import_buttons.addStretch()
        left.addLayout(import_buttons)

        self._import_error = QLabel()
        self._import_error.setStyleSheet(_ERROR_STYLE)
        self._import_error.setWordWrap(True)
        left.addWidget(self._import_error)

        root.addLayout(left, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)
        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)
        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        cp = self._control_panel
        cp.start_clicked.connect(self._on_to_start)
        cp.back_clicked.connect(self._on_step_back)
        cp.forward_clicked.connect(self._on_step_forward)
        cp.latest_clicked.connect(self._on_to_latest)
        cp.undo_clicked.connect(self._on_undo)
        cp.reset_clicked.connect(self._on_reset)

        self._move_panel.move_clicked.connect(self._on_move_history_selected)

        self._move_input.returnPressed.connect(self._on_play)
        self._btn_play.clicked.connect(self._on_play)
        self._fen_input.returnPressed.connect(self._on_load_fen)
        self._btn_load_fen.clicked.connect(self._on_load_fen)
        self._btn_start_fen.clicked.connect(self._on_start_fen)
        self._btn_random_fen.clicked.connect(self._on_random_fen)
        self._btn_import.clicked.connect(self._on_import)
        self._btn_keep_partial.clicked.connect(self._on_keep_partial)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_history_selected(self, ply: int) -> None:
        try:
            self._session.timeline.jump_to(ply)
        except NavigationOutOfRangeError:
            _LOGGER.debug("Ignoring history jump to ply %d", ply)

    def _on_to_start(self) -> None:
        self._session.timeline.to_start()

    def _on_step_back(self) -> None:
        self._session.timeline.step_back()

    def _on_step_forward(self) -> None:
        self._session.timeline.step_forward()

    def _on_to_latest(self) -> None:
        self._session.timeline.to_latest()

    def _on_undo(self) -> None:
        if not self._session.undo():
            self._status_label.setText("Nothing to undo")

    def _on_play(self) -> None:
        text = self._move_input.text()
        if not text.strip():
            return
        applied = self._session.play(parse_move_input(text))
        if applied is None:
            self._status_label.setText(f"Illegal move: {text.strip()}")
            return
        self._move_input.clear()
        self._status_label.setText(f"Played {applied.san}")

    def _on_reset(self) -> None:
        self._clear_import_failure()
        self._fen_error.clear()
        self._session.reset()
        self._refresh()

    def _on_load_fen(self) -> None:
        try:
            self._session.load_fen(self._fen_input.text())
        except MalformedPositionError as exc:
            self._fen_error.setText(exc.reason or "Invalid FEN.")
            self._fen_input.setStyleSheet("border: 2px solid #c62828;")
            return
        self._clear_fen_error()
        self._refresh()

    def _on_start_fen(self) -> None:
        self._session.reset()
        self._session.loaded_name = "Start"
        self._clear_fen_error()
        self._refresh()

    def _on_random_fen(self) -> None:
        try:
            self._session.load_random_preset()
        except MalformedPositionError as exc:
            self._fen_error.setText(exc.reason)
            return
        self._clear_fen_error()
        self._refresh()

    def _on_import(self) -> None:
        self._clear_import_failure()
        try:
            report = self._session.import_transcript(self._pgn_input.toPlainText())
        except MalformedPositionError as exc:
            self._import_error.setText(f"Invalid starting position: {exc.reason}")
            return

        if report.ok:
            self._refresh()
            self._status_label.setText(f"Imported {len(report.applied)} plies")
            return

        failure = report.failure
        assert failure is not None
        self._import_error.setText(
            f"Move {failure.index} ({failure.token}) is not legal; "
            f"{len(report.applied)} valid plies before it."
        )
        if report.adopted_partial:
            self._refresh()
        if not report.adopted_partial and report.applied:
            self._last_report = report
            self._btn_keep_partial.setVisible(True)

    def _on_keep_partial(self) -> None:
        report = self._last_report
        if report is None:
            return
        self._session.accept_partial(report)
        self._clear_import_failure()
        self._refresh()

    def _on_timeline_changed(self, _timeline: Timeline) -> None:
        self._refresh()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _clear_fen_error(self) -> None:
        self._fen_error.clear()
        self._fen_input.setStyleSheet("")

    def _clear_import_failure(self) -> None:
        self._last_report = None
        self._import_error.clear()
        self._btn_keep_partial.setVisible(False)

    def _refresh(self) -> None:
        timeline = self._session.timeline
        position = timeline.current_position()
        last = timeline.last_move()

        self._fen_label.setText(position)
        if last is None:
            self._last_move_label.setText("Last move: -")
        else:
            self._last_move_label.setText(
                f"Last move: {last.san} ({last.from_square} → {last.to_square})"
            )
        name = self._session.loaded_name
        self._loaded_label.setText(f"Loaded: {name}" if name else "")

        self._move_panel.set_pairs(
            self._session.move_pairs(),
            timeline.cursor,
            white_first=white_moves_first(timeline.base_position),
        )
        self._control_panel.set_navigation_state(
            can_step_back=timeline.can_step_back,
            can_step_forward=timeline.can_step_forward,
            has_moves=timeline.ply_count > 0,
        )
