"""Shared fixtures for engine tests."""

import pytest

from app.schemas.board import BoardConfig, House, Jump
from app.services.board import (
    DEFAULT_BOARD_FILE,
    Board,
    build_board,
    get_default_board,
    load_board_config,
)

# Reference board geometry
START_INDEX = 67
START_ON_INDEX = 5
BOUNCE_START = 68
BOUNCE_END = 71


def make_houses(count: int) -> list[House]:
    """Helper to create contiguous houses 1..count."""
    return [
        House(number=n, title=f"House {n}", description=f"Description {n}")
        for n in range(1, count + 1)
    ]


@pytest.fixture
def default_config() -> BoardConfig:
    """The bundled 8x9 board configuration."""
    return load_board_config(DEFAULT_BOARD_FILE)


@pytest.fixture
def default_board() -> Board:
    """The process-wide board built from the bundled configuration."""
    return get_default_board()


@pytest.fixture
def scenario_board(default_config: BoardConfig) -> Board:
    """Reference geometry with a setback 20 -> 5 and a chained 5 -> 30."""
    config = default_config.model_copy(
        update={
            "jumps": [
                Jump(from_house=20, to_house=5),
                Jump(from_house=5, to_house=30),
            ]
        }
    )
    return build_board(config)


@pytest.fixture
def mini_config() -> BoardConfig:
    """A 2x5 board: gate on house 5, entry on house 3, bounce zone houses 7-10."""
    return BoardConfig(
        rows=2,
        cols=5,
        start_house=5,
        start_on_house=3,
        bounce_start_house=7,
        bounce_end_house=10,
        houses=make_houses(10),
        jumps=[
            Jump(from_house=3, to_house=6),
            Jump(from_house=6, to_house=1),
        ],
    )


@pytest.fixture
def mini_board(mini_config: BoardConfig) -> Board:
    return build_board(mini_config)
