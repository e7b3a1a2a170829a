"""Pydantic schemas for move resolution and token progress."""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.board import JumpType


class AppliedJump(BaseModel):
    """The jump taken during a move, if any."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_house: int = Field(..., alias="from")
    to_house: int = Field(..., alias="to")
    jump_type: JumpType = Field(..., alias="type")


class MoveRequest(BaseModel):
    """Input for a single move resolution."""

    position_index: int = Field(..., ge=0, description="Zero-based board index")
    dice: int = Field(..., ge=1, le=6, description="Dice roll value (1-6)")
    has_started: bool = False


class MoveResult(BaseModel):
    """Immutable description of one turn's resolution.

    ``record_in_path`` is False only when the token is still waiting at the
    gate, so callers can keep those rolls out of the visited-houses log.
    """

    model_config = ConfigDict(frozen=True)

    from_index: int
    from_house: int
    to_index: int
    to_house: int
    dice: int
    has_started_before: bool
    has_started_after: bool
    started_this_roll: bool = False
    used_bounce: bool = False
    applied_jump: AppliedJump | None = None
    record_in_path: bool = True


class MoveResponse(BaseModel):
    move: MoveResult
    completed: bool


class TokenProgress(BaseModel):
    """Per-player token state, owned and persisted by the caller."""

    position_index: int = Field(..., ge=0)
    has_started: bool = False
    has_completed: bool = False
    roll_count_total: int = Field(default=0, ge=0)
    roll_count_until_start: int = Field(default=0, ge=0)


class HouseVisit(BaseModel):
    house: int
    count: int


class JourneySummary(BaseModel):
    """Aggregated view of a token's recorded moves."""

    path: list[int] = []
    repeats: list[HouseVisit] = []
    jumps_taken: list[AppliedJump] = []
    bounces: int = 0
    current_house: int
    completed: bool = False


class RollRequest(BaseModel):
    """Request body for rolling for a token; the server rolls when dice is omitted."""

    token: TokenProgress
    dice: int | None = Field(default=None, ge=1, le=6)
