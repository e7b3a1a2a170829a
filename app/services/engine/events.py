"""Move event types - emitted while resolving a roll.

Events describe what happened during a roll, enabling:
- Board animations (gate opening, bounce, arrow or snake)
- Journey logs and audit trails
- Notifications when a circuit completes
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from app.schemas.board import JumpType


class MoveEvent(BaseModel):
    """Base class for all move events."""

    event_type: str
    seq: int = 0  # Sequence number assigned during processing


class DiceRolled(MoveEvent):
    """The die was rolled for a token."""

    event_type: Literal["dice_rolled"] = "dice_rolled"
    value: int = Field(..., ge=1, le=6)
    roll_number: int = Field(..., description="Total rolls for this token, including this one")


class WaitingAtGate(MoveEvent):
    """The token is still at the gate; the roll was not a 6."""

    event_type: Literal["waiting_at_gate"] = "waiting_at_gate"
    house: int
    rolls_until_start: int


class TokenEnteredBoard(MoveEvent):
    """A 6 opened the gate and the token entered the board."""

    event_type: Literal["token_entered_board"] = "token_entered_board"
    from_house: int
    to_house: int
    rolls_until_start: int


class TokenMoved(MoveEvent):
    """A started token moved."""

    event_type: Literal["token_moved"] = "token_moved"
    from_house: int
    to_house: int
    roll_used: int


class TokenBounced(MoveEvent):
    """The move entered the bounce zone and was walked step by step.

    ``landed_house`` equals ``raw_house`` when the walk never reached a wall.
    """

    event_type: Literal["token_bounced"] = "token_bounced"
    raw_house: int = Field(..., description="House the roll would reach without the zone walls")
    landed_house: int


class JumpApplied(MoveEvent):
    """The token landed on an arrow or a snake."""

    event_type: Literal["jump_applied"] = "jump_applied"
    from_house: int
    to_house: int
    jump_type: JumpType


class JourneyCompleted(MoveEvent):
    """The token returned to the start house."""

    event_type: Literal["journey_completed"] = "journey_completed"
    house: int
    roll_count_total: int


# Union of all event types for type checking
AnyMoveEvent = Annotated[
    DiceRolled
    | WaitingAtGate
    | TokenEnteredBoard
    | TokenMoved
    | TokenBounced
    | JumpApplied
    | JourneyCompleted,
    Field(discriminator="event_type"),
]
