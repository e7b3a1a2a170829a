"""Completion check for a token's circuit."""

from app.services.board import Board, get_default_board


def is_completed(position_index: int, has_started: bool, board: Board | None = None) -> bool:
    """True once a started token is back on the start house."""
    if board is None:
        board = get_default_board()
    return has_started and position_index == board.rules.start_index
