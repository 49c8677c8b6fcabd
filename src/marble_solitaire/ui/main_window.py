"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from marble_solitaire.core.enums import GameOutcome
from marble_solitaire.core.types import Position
from marble_solitaire.game.interfaces import GameConfig, SelectResult
from marble_solitaire.game.session import GameSession
from marble_solitaire.game.state import GameState
from marble_solitaire.ui.board.board_view import BoardView
from marble_solitaire.ui.dialogs.game_over_dialog import GameOverDialog, game_over_title
from marble_solitaire.ui.dialogs.new_game_dialog import NewGameDialog
from marble_solitaire.ui.panels.control_panel import ControlPanel
from marble_solitaire.ui.panels.status_panel import StatusPanel
from marble_solitaire.ui.styles.theme import THEMES

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window for Marble Solitaire."""

    def __init__(self, config: GameConfig | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Marble Solitaire")
        self.setMinimumSize(640, 520)
        self.resize(1000, 800)

        self._session = GameSession(config)

        # Shown once the handler of the final click has returned.
        self._game_over_timer = QTimer(self)
        self._game_over_timer.setSingleShot(True)
        self._game_over_timer.setInterval(0)
        self._game_over_timer.timeout.connect(self._show_game_over_dialog)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self._start_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._status_panel = StatusPanel()
        right.addWidget(self._status_panel, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(240)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("New Game...", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game_dialog)
        self._menu_game.addAction(self._act_new_game)

        self._act_restart = QAction("Restart", self)
        self._act_restart.setShortcut("Ctrl+R")
        self._act_restart.triggered.connect(self._on_restart)
        self._menu_game.addAction(self._act_restart)

        self._menu_game.addSeparator()

        self._act_undo = QAction("Undo", self)
        self._act_undo.setShortcut("Z")
        self._act_undo.triggered.connect(self._on_undo)
        self._menu_game.addAction(self._act_undo)

        self._act_redo = QAction("Redo", self)
        self._act_redo.setShortcut("Y")
        self._act_redo.triggered.connect(self._on_redo)
        self._menu_game.addAction(self._act_redo)

        self._menu_game.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcuts([QKeySequence("Ctrl+Q"), QKeySequence("Esc")])
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None
        theme_group = QActionGroup(self)
        theme_group.setExclusive(True)
        self._theme_actions: dict[str, QAction] = {}
        for name in THEMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.triggered.connect(lambda _checked, n=name: self._apply_theme(n))
            theme_group.addAction(act)
            self._menu_view.addAction(act)
            self._theme_actions[name] = act
        self._theme_actions["Classic"].setChecked(True)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.cell_clicked.connect(self._on_cell_clicked)
        self._control_panel.new_game_clicked.connect(self._on_new_game_dialog)
        self._control_panel.restart_clicked.connect(self._on_restart)
        self._control_panel.undo_clicked.connect(self._on_undo)
        self._control_panel.redo_clicked.connect(self._on_redo)

    def _connect_game_events(self) -> None:
        """Subscribe to GameSession callbacks (idempotent)."""
        events = self._session.events
        self._replace_callback(events.on_board_changed, self._on_board_changed)
        self._replace_callback(events.on_selection_changed, self._on_selection_changed)
        self._replace_callback(events.on_game_over, self._on_game_over)

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameSession callbacks."""
        events = self._session.events
        self._remove_callback(events.on_board_changed, self._on_board_changed)
        self._remove_callback(events.on_selection_changed, self._on_selection_changed)
        self._remove_callback(events.on_game_over, self._on_game_over)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Game lifecycle ───────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    def _start_game(self, config: GameConfig | None = None) -> None:
        self._game_over_timer.stop()
        self._board_view.board_scene.set_interactive(True)
        self._session.new_game(config)
        if not self._session.outcome.is_terminal:
            self._status_panel.start(lambda: self._session.elapsed)
        self._update_status()

    def _on_new_game_dialog(self) -> None:
        config = NewGameDialog.ask(self._session.config, self)
        if config is None:
            return
        self._start_game(config)

    def _on_restart(self) -> None:
        self._start_game()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._game_over_timer.stop()
        self._status_panel.stop()
        self._disconnect_game_events()
        super().closeEvent(event)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_cell_clicked(self, pos: Position) -> None:
        result = self._session.select_or_move(pos)
        if result == SelectResult.NO_OP:
            _LOGGER.debug("Ignored click on %s", pos)

    def _on_undo(self) -> None:
        if self._session.undo():
            self._update_status()

    def _on_redo(self) -> None:
        if self._session.redo():
            self._update_status()

    def _apply_theme(self, name: str) -> None:
        theme = THEMES.get(name)
        if theme is None:
            _LOGGER.warning("Unknown board theme: %s", name)
            return
        self._board_view.board_scene.set_theme(theme)

    # ── Game event callbacks ─────────────────────────────────────────────

    def _on_board_changed(self, state: GameState) -> None:
        self._board_view.show_board(state.board)
        self._status_panel.set_marbles(state.marble_count)
        self._status_panel.set_undos(state.undo_budget)
        self._control_panel.set_history_actions(state.can_undo, state.can_redo)
        self._update_status()

    def _on_selection_changed(self, selection: Position | None) -> None:
        self._board_view.board_scene.set_selection(selection)

    def _on_game_over(self, outcome: GameOutcome) -> None:
        self._status_panel.stop()
        self._board_view.board_scene.set_interactive(False)
        self._control_panel.set_history_actions(False, False)
        self._status_label.setText(game_over_title(outcome))
        self._game_over_timer.start()

    def _show_game_over_dialog(self) -> None:
        outcome = self._session.outcome
        if not outcome.is_terminal:
            return
        if GameOverDialog.ask_replay(
            outcome, self._session.elapsed, self._session.marble_count, self
        ):
            self._on_restart()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        session = self._session
        if session.outcome.is_terminal:
            return
        cfg = session.config
        rule = "center finish" if cfg.center_win else "any finish"
        self._status_label.setText(
            f"{cfg.board_size}x{cfg.board_size} | {rule} | "
            f"moves: {session.state.moves_played}"
        )
