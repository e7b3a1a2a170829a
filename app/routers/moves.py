"""REST endpoints for move resolution.

Stateless: the caller sends the token state and persists what comes back.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from app.dependencies.board import CurrentBoard
from app.schemas.move import MoveRequest, MoveResponse, RollRequest
from app.schemas.roll import RollResponse
from app.services.engine import advance_token, apply_move, is_completed, roll_dice
from app.services.errors import InvalidInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/moves", tags=["moves"])

# ProcessResult error codes that mean the request conflicts with token state
CONFLICT_CODES = {"TOKEN_ALREADY_COMPLETED"}

HTTP_422_UNPROCESSABLE = 422


@router.post("", response_model=MoveResponse)
async def resolve_move(request: MoveRequest, board: CurrentBoard):
    """Resolve a single die roll for a token.

    Raises:
        HTTPException 422: If the position is outside the board.
    """
    logger.info(
        "POST /moves - position: %d, dice: %d, started: %s",
        request.position_index,
        request.dice,
        request.has_started,
    )
    try:
        move = apply_move(request.position_index, request.dice, request.has_started, board)
    except InvalidInput as exc:
        logger.warning("Move rejected: %s - %s", exc.code, exc.message)
        raise HTTPException(
            status_code=HTTP_422_UNPROCESSABLE,
            detail={"code": exc.code, "message": exc.message},
        ) from exc

    return MoveResponse(
        move=move,
        completed=is_completed(move.to_index, move.has_started_after, board),
    )


@router.post("/roll", response_model=RollResponse)
async def roll_for_token(request: RollRequest, board: CurrentBoard):
    """Roll for a token and return its updated progress with move events.

    Raises:
        HTTPException 409: If the token already completed its journey.
        HTTPException 422: If the token position is outside the board.
    """
    dice = request.dice if request.dice is not None else roll_dice()
    logger.info(
        "POST /moves/roll - position: %d, dice: %d",
        request.token.position_index,
        dice,
    )

    result = advance_token(request.token, dice, board)
    if not result.success:
        code = (
            status.HTTP_409_CONFLICT
            if result.error_code in CONFLICT_CODES
            else HTTP_422_UNPROCESSABLE
        )
        logger.warning(
            "Roll rejected: %s - %s", result.error_code, result.error_message
        )
        raise HTTPException(
            status_code=code,
            detail={"code": result.error_code, "message": result.error_message},
        )

    return RollResponse(token=result.token, move=result.move, events=result.events)
