"""Pydantic schemas for roll responses."""

from pydantic import BaseModel

from app.schemas.move import MoveResult, TokenProgress
from app.services.engine.events import AnyMoveEvent


class RollResponse(BaseModel):
    """Response from rolling for a token."""

    token: TokenProgress
    move: MoveResult
    events: list[AnyMoveEvent]
