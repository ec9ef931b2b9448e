"""
Text rendering of a board for terminal play.
"""
from .board import Board


def _cell_symbol(board: Board, row: int, col: int, reveal_mines: bool) -> str:
    """Single character shown for one cell."""
    cell = board.get_cell(row, col)
    if reveal_mines and cell.is_mine:
        return "*"
    if cell.is_flagged:
        return "F"
    if cell.is_hidden:
        return "."
    if cell.adjacent_mines == 0:
        return " "
    return str(cell.adjacent_mines)


def render_board(board: Board, reveal_mines: bool = False) -> str:
    """
    Render board as an ASCII grid with 1-based row and column labels.

    Args:
        board: Board to draw.
        reveal_mines: Show every mine as ``*``, for the end-of-round view.

    Returns:
        Multi-line string ending with the remaining flag count.
    """
    width = len(str(board.size))
    lines = [
        " " * (width + 1)
        + " ".join(str(col + 1).rjust(width) for col in range(board.size))
    ]

    for row in range(board.size):
        symbols = [
            _cell_symbol(board, row, col, reveal_mines).rjust(width)
            for col in range(board.size)
        ]
        lines.append(str(row + 1).rjust(width) + " " + " ".join(symbols))

    lines.append(f"Flags remaining: {board.flags_remaining}")
    return "\n".join(lines)
