"""Pydantic schemas for board definitions and rules constants."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class JumpType(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class House(BaseModel):
    """A numbered cell on the board."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, description="1-based house number")
    title: str
    description: str
    question: str | None = Field(
        default=None, description="Reflective question shown with the house"
    )


class Jump(BaseModel):
    """Directed shortcut (forward) or setback (backward) between two houses."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_house: int = Field(..., alias="from")
    to_house: int = Field(..., alias="to")

    @property
    def jump_type(self) -> JumpType:
        # Self-loops are rejected when the board is built
        if self.to_house > self.from_house:
            return JumpType.FORWARD
        return JumpType.BACKWARD


# Raw configuration source, as shipped in app/data/board.json
class BoardConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: int
    cols: int
    start_house: int
    start_on_house: int
    bounce_start_house: int
    bounce_end_house: int
    houses: list[House]
    jumps: list[Jump] = []


class RulesConstants(BaseModel):
    """Geometry and gameplay constants derived once from a BoardConfig.

    Indices are zero-based (house ``n`` lives at index ``n - 1``).
    """

    model_config = ConfigDict(frozen=True)

    rows: int
    cols: int
    total_cells: int
    start_house: int
    start_index: int
    start_on_house: int
    start_on_index: int
    bounce_start: int
    bounce_end: int
    gate_roll: int = 6
    min_dice: int = 1
    max_dice: int = 6

    @property
    def bounce_width(self) -> int:
        return self.bounce_end - self.bounce_start + 1

    @property
    def max_index(self) -> int:
        return self.total_cells - 1


class BoardCell(BaseModel):
    """Grid coordinates of a house; row 0 is the bottom row."""

    model_config = ConfigDict(frozen=True)

    house_number: int
    row: int
    col: int


# API response models
class JumpInfo(BaseModel):
    from_house: int
    to_house: int
    jump_type: JumpType


class BoardResponse(BaseModel):
    rules: RulesConstants
    jumps: list[JumpInfo]
    cells: list[BoardCell]


class HouseResponse(BaseModel):
    house: House
    cell: BoardCell | None = None
    jump: JumpInfo | None = None
    prompt: str
