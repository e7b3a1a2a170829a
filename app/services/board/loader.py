"""Board loading and load-time validation.

Boards are built once from a BoardConfig and never mutated afterwards.
Reloading means building a new Board and swapping the reference.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from pydantic import ValidationError

from app.config import get_settings
from app.schemas.board import BoardConfig, House, Jump, RulesConstants
from app.services.errors import ConfigurationError

from .rules import compute_rules_constants

logger = logging.getLogger(__name__)

DEFAULT_BOARD_FILE = Path(__file__).resolve().parents[2] / "data" / "board.json"


@dataclass(frozen=True)
class Board:
    """A validated, read-only board: geometry plus the house and jump tables."""

    rules: RulesConstants
    houses: Mapping[int, House]
    jumps: Mapping[int, Jump]


def load_board_config(path: Path | str) -> BoardConfig:
    """Read a board configuration JSON file.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or malformed.
    """
    path = Path(path)
    logger.info("Loading board configuration from %s", path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Board file not found: {path}", "BOARD_FILE_NOT_FOUND") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Board file is not valid JSON: {exc}", "BOARD_FILE_INVALID") from exc

    try:
        return BoardConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Board file is malformed: {exc}", "BOARD_FILE_INVALID") from exc


def _validate_geometry(config: BoardConfig, total_cells: int) -> None:
    if config.rows < 1 or config.cols < 1:
        raise ConfigurationError(
            f"Board must have at least one row and column, got {config.rows}x{config.cols}",
            "INVALID_GEOMETRY",
        )

    for name in ("start_house", "start_on_house", "bounce_start_house", "bounce_end_house"):
        value = getattr(config, name)
        if not 1 <= value <= total_cells:
            raise ConfigurationError(
                f"{name}={value} is outside [1, {total_cells}]",
                "INVALID_GEOMETRY",
            )

    if config.bounce_start_house >= config.bounce_end_house:
        raise ConfigurationError(
            f"Bounce zone must span at least two houses, got "
            f"[{config.bounce_start_house}, {config.bounce_end_house}]",
            "INVALID_BOUNCE_ZONE",
        )

    if config.bounce_end_house != total_cells:
        raise ConfigurationError(
            f"Bounce zone must end on the last house ({total_cells}), "
            f"got {config.bounce_end_house}",
            "INVALID_BOUNCE_ZONE",
        )

    # The reflection is always entered moving forward from outside the corridor
    if config.start_house >= config.bounce_start_house:
        raise ConfigurationError(
            f"start_house={config.start_house} must precede the bounce zone "
            f"starting at {config.bounce_start_house}",
            "INVALID_BOUNCE_ZONE",
        )


def _validate_houses(houses: list[House], total_cells: int) -> dict[int, House]:
    by_number: dict[int, House] = {}
    for house in houses:
        if house.number in by_number:
            raise ConfigurationError(f"Duplicate house number: {house.number}", "DUPLICATE_HOUSE")
        by_number[house.number] = house

    expected = set(range(1, total_cells + 1))
    missing = sorted(expected - by_number.keys())
    if missing:
        raise ConfigurationError(f"Missing house numbers: {missing}", "MISSING_HOUSE")
    extra = sorted(by_number.keys() - expected)
    if extra:
        raise ConfigurationError(
            f"House numbers outside [1, {total_cells}]: {extra}",
            "HOUSE_OUT_OF_RANGE",
        )
    return by_number


def _validate_jumps(jumps: list[Jump], total_cells: int) -> dict[int, Jump]:
    by_from: dict[int, Jump] = {}
    for jump in jumps:
        for end in (jump.from_house, jump.to_house):
            if not 1 <= end <= total_cells:
                raise ConfigurationError(
                    f"Jump {jump.from_house}->{jump.to_house} references house {end} "
                    f"outside [1, {total_cells}]",
                    "JUMP_OUT_OF_RANGE",
                )
        if jump.from_house == jump.to_house:
            raise ConfigurationError(
                f"Jump from house {jump.from_house} to itself",
                "JUMP_SELF_LOOP",
            )
        if jump.from_house in by_from:
            raise ConfigurationError(
                f"House {jump.from_house} has more than one outgoing jump",
                "DUPLICATE_JUMP",
            )
        by_from[jump.from_house] = jump
    return by_from


def build_board(config: BoardConfig) -> Board:
    """Validate a BoardConfig and freeze it into a Board.

    Raises:
        ConfigurationError: On the first violated board invariant.
    """
    total_cells = config.rows * config.cols
    _validate_geometry(config, total_cells)
    houses = _validate_houses(config.houses, total_cells)
    jumps = _validate_jumps(config.jumps, total_cells)

    board = Board(
        rules=compute_rules_constants(config),
        houses=MappingProxyType(houses),
        jumps=MappingProxyType(jumps),
    )
    logger.info(
        "Board built: %d houses, %d jumps, start_house=%d",
        len(houses),
        len(jumps),
        config.start_house,
    )
    return board


def load_board(path: Path | str) -> Board:
    return build_board(load_board_config(path))


@lru_cache
def get_default_board() -> Board:
    """Get the process-wide board, loaded once from settings."""
    settings = get_settings()
    path = settings.BOARD_FILE or DEFAULT_BOARD_FILE
    return load_board(path)


def reload_default_board() -> Board:
    """Replace the process-wide board with a freshly loaded one."""
    get_default_board.cache_clear()
    return get_default_board()
