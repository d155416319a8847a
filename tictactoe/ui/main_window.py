import logging

from .. import config
from ..ui.board_widget import BoardWidget
from ..ui.controller import GameController

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self.controller = GameController(self)
        self.board_widget = BoardWidget(self.controller.game, parent=self)

        self.controller.move_made.connect(self._on_move_made)
        self.controller.game_finished.connect(self._on_game_finished)
        self.controller.game_reset.connect(self._on_game_reset)

        self._setup_ui()
        self._update_message(self.controller.status_text(), is_turn=True)
        logger.info("window created")

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self.controller.play)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.controller.new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self._confirm_quit)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset/quit buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); f.setBold(True); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.controller.new_game)
        self.quit_button = QPushButton("Quit"); self.quit_button.clicked.connect(self._confirm_quit)
        for w in (self.message_label, self.reset_button, self.quit_button):
            hl.addWidget(w)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success:   style = "color: lime;"
        elif is_turn:    style = "color: #8acaff;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot(int, int, str)
    def _on_move_made(self, r, c, player):
        self.board_widget.update()
        if not self.controller.game.is_game_over():
            self._update_message(self.controller.status_text(), is_turn=True)

    @Slot(str)
    def _on_game_finished(self, outcome):
        # end game UI updates, then offer another round
        self.board_widget.set_accept_clicks(False)
        self._update_message(self.controller.status_text(), is_success=True)
        if outcome == "Tie":
            msg = "It's a Tie!"
        else:
            msg = f"Player {outcome} wins!"
        QMessageBox.information(self, "Game Over", msg)
        choice = QMessageBox.question(
            self, "Play Again?", "Would you like to play again?",
            QMessageBox.Yes | QMessageBox.No
        )
        if choice == QMessageBox.Yes:
            self.controller.new_game()
        else:
            self.close()

    @Slot()
    def _on_game_reset(self):
        # blank board, clicks back on
        self.board_widget.set_accept_clicks(True)
        self.board_widget.update()
        self._update_message(self.controller.status_text(), is_turn=True)

    @Slot()
    def _confirm_quit(self):
        choice = QMessageBox.question(
            self, "Quit Game", "Are you sure you want to quit?",
            QMessageBox.Yes | QMessageBox.No
        )
        if choice == QMessageBox.Yes:
            self.close()

    def closeEvent(self, event):
        logger.info("window closed")
        event.accept()
