"""MainWindow — top-level window assembling the board and status bar."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from radialchess.core.enums import Color, TapResult
from radialchess.game.controller import GameController
from radialchess.ui.board_widget import BoardWidget
from radialchess.ui.settings import AppSettings
from radialchess.ui.styles.theme import THEMES


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Radial Chess")
        self.setMinimumSize(480, 520)
        self.resize(760, 800)

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()
        self.apply_settings()
        self._update_score()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_widget = BoardWidget(self._controller)
        self.setCentralWidget(self._board_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._score_label = QLabel()
        self._status.addWidget(self._status_label, 1)
        self._status.addPermanentWidget(self._score_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_match = QAction("&New match", self)
        self._act_new_match.setShortcut("Ctrl+N")
        self._act_new_match.triggered.connect(self._on_new_match)
        menu_game.addAction(self._act_new_match)

        menu_game.addSeparator()
        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

        menu_view = menu_bar.addMenu("&View")
        assert menu_view is not None

        self._act_legal_moves = QAction("Show &legal moves", self)
        self._act_legal_moves.setCheckable(True)
        self._act_legal_moves.toggled.connect(self._on_toggle_legal_moves)
        menu_view.addAction(self._act_legal_moves)

        menu_theme = menu_view.addMenu("Board &theme")
        assert menu_theme is not None
        self._theme_actions: dict[str, QAction] = {}
        for name in THEMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.triggered.connect(lambda _checked, n=name: self._on_theme(n))
            menu_theme.addAction(act)
            self._theme_actions[name] = act

    def _connect_game_events(self) -> None:
        self._controller.events.on_reset.append(self._on_match_reset)
        self._board_widget.tapped.connect(self._on_tapped)

    # ── Settings ─────────────────────────────────────────────────────────

    def apply_settings(self) -> None:
        s = self._settings
        self._board_widget.set_theme(s.theme())
        self._board_widget.set_show_legal_moves(s.show_legal_moves)

        self._act_legal_moves.blockSignals(True)
        self._act_legal_moves.setChecked(s.show_legal_moves)
        self._act_legal_moves.blockSignals(False)
        for name, act in self._theme_actions.items():
            act.setChecked(name == s.board_theme)

    def _on_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self.apply_settings()

    def _on_toggle_legal_moves(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self.apply_settings()

    # ── Game events ──────────────────────────────────────────────────────

    def _on_new_match(self) -> None:
        self._controller.new_match()
        self._board_widget.update()

    def _on_match_reset(self, winner: Color | None) -> None:
        if winner is None:
            self._status_label.setText("New match")
        else:
            self._status_label.setText(f"{winner.name.capitalize()} wins the match")
        self._update_score()

    def _on_tapped(self, result: int) -> None:
        tap = TapResult(result)
        if tap == TapResult.SELECTED:
            piece = self._controller.board.current_selection()
            if piece is not None:
                self._status_label.setText(
                    f"{piece.color.name.capitalize()} {piece.kind.name.lower()}"
                    f" at {piece.position}"
                )
        elif tap in (TapResult.MOVED, TapResult.DESELECTED):
            self._status_label.setText("Ready")

    def _update_score(self) -> None:
        self._score_label.setText(
            f"Black {self._controller.score(Color.BLACK)}"
            f" : {self._controller.score(Color.WHITE)} White"
        )

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def status_text(self) -> str:
        return self._status_label.text()
