"""REST endpoints for board definitions."""

import logging

from fastapi import APIRouter, HTTPException, status

from app.dependencies.board import CurrentBoard
from app.schemas.board import BoardResponse, HouseResponse, JumpInfo
from app.services.board import (
    get_house_by_number,
    get_house_cell,
    get_house_prompt,
    get_jump,
    iter_board_cells,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/board", tags=["board"])


@router.get("", response_model=BoardResponse)
async def get_board_layout(board: CurrentBoard):
    """Get board geometry, jumps and cells in drawing order."""
    logger.info("GET /board")
    jumps = [
        JumpInfo(
            from_house=jump.from_house,
            to_house=jump.to_house,
            jump_type=jump.jump_type,
        )
        for jump in sorted(board.jumps.values(), key=lambda j: j.from_house)
    ]
    return BoardResponse(rules=board.rules, jumps=jumps, cells=iter_board_cells(board))


@router.get("/houses/{number}", response_model=HouseResponse)
async def get_house(number: int, board: CurrentBoard):
    """Get a single house with its grid cell, outgoing jump and prompt.

    Raises:
        HTTPException 404: If the house number is not on the board.
    """
    logger.info("GET /board/houses/%d", number)

    house = get_house_by_number(board, number)
    if house is None:
        logger.warning("House not found: %d", number)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"House {number} not found",
        )

    jump = get_jump(board, number)
    return HouseResponse(
        house=house,
        cell=get_house_cell(board, number),
        jump=(
            JumpInfo(from_house=jump.from_house, to_house=jump.to_house, jump_type=jump.jump_type)
            if jump is not None
            else None
        ),
        prompt=get_house_prompt(board, number) or "",
    )
