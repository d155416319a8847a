import logging
from typing import List, Tuple

from .enums import Cell, Player

logger = logging.getLogger(__name__)

BOARD_SIZE = 3  # fixed 3x3 grid

# the 8 winning triples: rows, cols, diags
LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    tuple(tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE))
    + tuple(tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE))
    + (tuple((i, i) for i in range(BOARD_SIZE)),
       tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)))
)


class Board:
    """
    3x3 grid storage and the queries over it
    """
    def __init__(self):
        """
        init empty grid
        """
        self.board_size = BOARD_SIZE
        self.cells: List[List[Cell]] = []
        self.move_count = 0               # non-empty cells
        self.clear()

    def clear(self):
        """
        set every cell empty and reset counter
        """
        self.cells = [[Cell.EMPTY for _ in range(self.board_size)]
                      for _ in range(self.board_size)]
        self.move_count = 0

    def _in_bounds(self, row, col) -> bool:
        return isinstance(row, int) and isinstance(col, int) \
            and 0 <= row < self.board_size and 0 <= col < self.board_size

    def is_valid_move(self, row, col) -> bool:
        """
        true if coords on the board and cell blank
        """
        if not self._in_bounds(row, col):
            return False
        return self.cells[row][col] is Cell.EMPTY

    def set_value(self, row, col, player: Player):
        """
        place player's mark; invalid moves are ignored
        """
        if not self.is_valid_move(row, col):
            logger.debug("ignored set_value(%r, %r, %s)", row, col, player.value)
            return
        self.cells[row][col] = player.cell
        self.move_count += 1

    def get_value(self, row, col) -> Cell:
        """
        cell at (row, col); raises IndexError off the board
        """
        if not self._in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        return self.cells[row][col]

    def is_winner(self, player: Player) -> bool:
        """
        scan rows, cols, diags for 3 in a row
        """
        mark = player.cell
        return any(all(self.cells[r][c] is mark for r, c in line)
                   for line in LINES)

    def is_tie(self) -> bool:
        """
        full board, or every line already blocked by both marks
        """
        if self.is_full():
            return True
        return self._no_win_possible()

    def _no_win_possible(self) -> bool:
        for line in LINES:
            marks = {self.cells[r][c] for r, c in line}
            if Cell.X not in marks or Cell.O not in marks:
                return False
        return True

    def is_full(self) -> bool:
        return self.move_count == self.board_size * self.board_size

    def get_move_count(self) -> int:
        return self.move_count

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        (row, col) of every blank cell, row-major
        """
        return [(r, c) for r in range(self.board_size)
                for c in range(self.board_size)
                if self.cells[r][c] is Cell.EMPTY]

    def __str__(self):
        rows = []
        for r, row in enumerate(self.cells):
            rows.append(f"{r}  " + ' | '.join(cell.value or ' ' for cell in row))
        sep = "\n   " + "-" * (4 * self.board_size - 3) + "\n"
        return sep.join(rows)
