"""
Closed value types for the tic-tac-toe core.
"""
from enum import Enum


class Cell(Enum):
    """Contents of a single board square."""
    EMPTY = ''
    X = 'X'
    O = 'O'


class Player(Enum):
    """The two players; X always moves first."""
    X = 'X'
    O = 'O'

    def opposite(self) -> "Player":
        """Get the other player."""
        return Player.O if self is Player.X else Player.X

    @property
    def cell(self) -> Cell:
        """Cell value holding this player's mark."""
        return Cell(self.value)


class Outcome(Enum):
    """Result of a game. NONE means there is no result yet."""
    X = 'X'
    O = 'O'
    TIE = 'Tie'
    NONE = None
