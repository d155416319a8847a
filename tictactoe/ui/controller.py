import logging

from PySide6.QtCore import QObject, Signal, Slot

from ..enums import Outcome
from ..game import Game

logger = logging.getLogger(__name__)


class GameController(QObject):
    """
    qt adapter that owns the game and pushes state changes as signals
    """
    move_made = Signal(int, int, str)   # row, col, player who moved
    game_finished = Signal(str)         # Outcome value: 'X', 'O' or 'Tie'
    game_reset = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._game = Game()

    @property
    def game(self) -> Game:
        return self._game

    @Slot(int, int)
    def play(self, row, col) -> bool:
        """
        forward a click to the game and announce the result
        """
        # capture before the move: no switch happens after a terminal move
        mover = self._game.get_current_player()
        if not self._game.make_move(row, col):
            return False
        self.move_made.emit(row, col, mover.value)
        if self._game.is_game_over():
            outcome = self._game.get_winner()
            logger.info("game finished: %s", outcome.value)
            self.game_finished.emit(outcome.value)
        return True

    @Slot()
    def new_game(self):
        self._game.new_game()
        self.game_reset.emit()

    def status_text(self) -> str:
        outcome = self._game.get_winner()
        if outcome is Outcome.TIE:
            return "Game Over - It's a Tie!"
        if outcome is not Outcome.NONE:
            return f"Player {outcome.value} Wins!"
        return f"Player {self._game.get_current_player().value}'s turn"
