from typing import Annotated

from fastapi import Depends

from app.services.board import Board, get_default_board


def get_board() -> Board:
    """Get the process-wide board for request handlers.

    Overridable through ``app.dependency_overrides`` to serve another board.
    """
    return get_default_board()


CurrentBoard = Annotated[Board, Depends(get_board)]
