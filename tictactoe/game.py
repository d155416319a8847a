import logging

from .board import Board
from .enums import Outcome, Player

logger = logging.getLogger(__name__)

# earliest move counts at which a result is combinatorially possible
MIN_MOVES_FOR_WIN = 5
MIN_MOVES_FOR_TIE = 7


class Game:
    """
    turn order and game-over detection on top of a Board
    """
    def __init__(self):
        """
        init board and flags
        """
        self._board = Board()
        self.current_player = Player.X    # X always starts
        self.game_over = False            # sticky until new_game

    @property
    def board(self) -> Board:
        # read access for renderers; mutate only through make_move
        return self._board

    def make_move(self, row, col) -> bool:
        """
        place current player's mark, check result, pass the turn
        returns: True if the move was accepted
        """
        if self.game_over or not self._board.is_valid_move(row, col):
            logger.debug("rejected move (%r, %r) by %s", row, col,
                         self.current_player.value)
            return False

        self._board.set_value(row, col, self.current_player)
        logger.debug("%s played (%d, %d), move %d", self.current_player.value,
                     row, col, self._board.get_move_count())
        logger.debug("board:\n%s", self._board)
        self._check_game_over()
        if not self.game_over:
            self.current_player = self.current_player.opposite()
        return True

    def _check_game_over(self):
        moves = self._board.get_move_count()
        if moves >= MIN_MOVES_FOR_WIN:
            if self._board.is_winner(Player.X) or self._board.is_winner(Player.O):
                self.game_over = True
                logger.info("game over after %d moves: %s wins",
                            moves, self.current_player.value)
                return
        if moves >= MIN_MOVES_FOR_TIE and self._board.is_tie():
            self.game_over = True
            logger.info("game over after %d moves: tie with %d cells open",
                        moves, len(self._board.empty_cells()))

    def get_current_player(self) -> Player:
        return self.current_player

    def is_game_over(self) -> bool:
        return self.game_over

    def get_winner(self) -> Outcome:
        """
        X win, then O win, then tie; NONE while the game is running
        """
        if not self.game_over:
            return Outcome.NONE
        if self._board.is_winner(Player.X):
            return Outcome.X
        if self._board.is_winner(Player.O):
            return Outcome.O
        if self._board.is_tie():
            return Outcome.TIE
        return Outcome.NONE

    def get_move_count(self) -> int:
        return self._board.get_move_count()

    def new_game(self):
        """
        clear board and reset flags
        """
        self._board.clear()
        self.current_player = Player.X
        self.game_over = False
        logger.info("new game")
