"""Tests for board loading, validation, rules constants and lookups.

Critical scenarios tested:
- Bundled board loads with the reference geometry
- Invalid tables raise ConfigurationError at load time
- Lookups return None for unknown houses
- Serpentine grid layout
"""

import json
from pathlib import Path

import pytest

from app.schemas.board import BoardConfig, House, Jump, JumpType
from app.services.board import (
    Board,
    build_board,
    compute_rules_constants,
    get_house_by_number,
    get_house_cell,
    get_house_prompt,
    get_house_text,
    get_jump,
    get_jump_target,
    get_jump_type,
    iter_board_cells,
    load_board,
    load_board_config,
)
from app.services.errors import ConfigurationError

from .conftest import BOUNCE_END, BOUNCE_START, START_INDEX, START_ON_INDEX


class TestRulesConstants:
    def test_reference_geometry(self, default_board: Board):
        rules = default_board.rules

        assert rules.rows == 8
        assert rules.cols == 9
        assert rules.total_cells == 72
        assert rules.start_house == 68
        assert rules.start_index == START_INDEX
        assert rules.start_on_house == 6
        assert rules.start_on_index == START_ON_INDEX
        assert rules.bounce_start == BOUNCE_START
        assert rules.bounce_end == BOUNCE_END
        assert rules.bounce_width == 4
        assert rules.max_index == 71
        assert rules.gate_roll == 6

    def test_recompute_is_stable(self, default_config: BoardConfig):
        assert compute_rules_constants(default_config) == compute_rules_constants(default_config)

    def test_rules_are_frozen(self, default_board: Board):
        with pytest.raises(Exception):
            default_board.rules.start_index = 0  # type: ignore[misc]


class TestBoardLoading:
    def test_bundled_board(self, default_board: Board):
        assert len(default_board.houses) == 72
        assert len(default_board.jumps) == 20

    def test_tables_are_read_only(self, default_board: Board):
        with pytest.raises(TypeError):
            default_board.houses[1] = default_board.houses[2]  # type: ignore[index]
        with pytest.raises(TypeError):
            default_board.jumps[3] = default_board.jumps[10]  # type: ignore[index]

    def test_load_from_file(self, tmp_path: Path, mini_config: BoardConfig):
        path = tmp_path / "board.json"
        path.write_text(mini_config.model_dump_json(by_alias=True), encoding="utf-8")

        board = load_board(path)

        assert board.rules.total_cells == 10
        assert get_jump_target(board, 3) == 6

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_board_config(tmp_path / "missing.json")
        assert exc_info.value.code == "BOARD_FILE_NOT_FOUND"

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "board.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_board_config(path)
        assert exc_info.value.code == "BOARD_FILE_INVALID"

    def test_malformed_shape(self, tmp_path: Path):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({"rows": 8}), encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_board_config(path)
        assert exc_info.value.code == "BOARD_FILE_INVALID"


class TestBoardValidation:
    """Each board invariant is checked before any move is served."""

    def _expect(self, config: BoardConfig, code: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            build_board(config)
        assert exc_info.value.code == code

    def test_duplicate_house(self, mini_config: BoardConfig):
        houses = mini_config.houses + [mini_config.houses[0]]
        self._expect(mini_config.model_copy(update={"houses": houses}), "DUPLICATE_HOUSE")

    def test_missing_house(self, mini_config: BoardConfig):
        houses = mini_config.houses[:-1]
        self._expect(mini_config.model_copy(update={"houses": houses}), "MISSING_HOUSE")

    def test_house_out_of_range(self, mini_config: BoardConfig):
        houses = mini_config.houses + [House(number=11, title="Extra", description="")]
        self._expect(mini_config.model_copy(update={"houses": houses}), "HOUSE_OUT_OF_RANGE")

    def test_jump_out_of_range(self, mini_config: BoardConfig):
        jumps = [Jump(from_house=4, to_house=11)]
        self._expect(mini_config.model_copy(update={"jumps": jumps}), "JUMP_OUT_OF_RANGE")

    def test_jump_from_zero(self, mini_config: BoardConfig):
        jumps = [Jump(from_house=0, to_house=4)]
        self._expect(mini_config.model_copy(update={"jumps": jumps}), "JUMP_OUT_OF_RANGE")

    def test_self_loop(self, mini_config: BoardConfig):
        jumps = [Jump(from_house=4, to_house=4)]
        self._expect(mini_config.model_copy(update={"jumps": jumps}), "JUMP_SELF_LOOP")

    def test_two_jumps_from_same_house(self, mini_config: BoardConfig):
        jumps = [Jump(from_house=4, to_house=1), Jump(from_house=4, to_house=8)]
        self._expect(mini_config.model_copy(update={"jumps": jumps}), "DUPLICATE_JUMP")

    def test_start_house_out_of_range(self, mini_config: BoardConfig):
        self._expect(mini_config.model_copy(update={"start_house": 0}), "INVALID_GEOMETRY")

    def test_start_on_house_out_of_range(self, mini_config: BoardConfig):
        self._expect(mini_config.model_copy(update={"start_on_house": 11}), "INVALID_GEOMETRY")

    def test_empty_grid(self, mini_config: BoardConfig):
        self._expect(mini_config.model_copy(update={"rows": 0}), "INVALID_GEOMETRY")

    def test_inverted_bounce_zone(self, mini_config: BoardConfig):
        config = mini_config.model_copy(update={"bounce_start_house": 10})
        self._expect(config, "INVALID_BOUNCE_ZONE")

    def test_bounce_zone_not_at_end(self, mini_config: BoardConfig):
        config = mini_config.model_copy(update={"bounce_end_house": 9})
        self._expect(config, "INVALID_BOUNCE_ZONE")

    def test_start_house_inside_bounce_zone(self, mini_config: BoardConfig):
        config = mini_config.model_copy(update={"start_house": 8})
        self._expect(config, "INVALID_BOUNCE_ZONE")

    def test_configuration_error_is_value_error(self, mini_config: BoardConfig):
        with pytest.raises(ValueError):
            build_board(mini_config.model_copy(update={"rows": 0}))


class TestLookups:
    def test_house_by_number(self, default_board: Board):
        house = get_house_by_number(default_board, 68)

        assert house is not None
        assert house.number == 68
        assert house.title == "Vaikuntha Loka"

    @pytest.mark.parametrize("number", [0, -1, 73, 1000])
    def test_house_out_of_range_is_absent(self, default_board: Board, number: int):
        assert get_house_by_number(default_board, number) is None

    def test_jump_target(self, default_board: Board):
        assert get_jump_target(default_board, 10) == 23
        assert get_jump_target(default_board, 72) == 51

    def test_no_jump(self, default_board: Board):
        assert get_jump(default_board, 1) is None
        assert get_jump_target(default_board, 1) is None
        assert get_jump_type(default_board, 1) is None
        assert get_jump_target(default_board, 500) is None

    def test_jump_types(self, default_board: Board):
        assert get_jump_type(default_board, 54) == JumpType.FORWARD
        assert get_jump_type(default_board, 63) == JumpType.BACKWARD

    def test_jump_type_is_derived(self):
        assert Jump(from_house=3, to_house=9).jump_type == JumpType.FORWARD
        assert Jump(from_house=9, to_house=3).jump_type == JumpType.BACKWARD

    def test_jump_parses_from_to_keys(self):
        jump = Jump.model_validate({"from": 12, "to": 8})
        assert jump.from_house == 12
        assert jump.to_house == 8


class TestPresentation:
    def test_prompt_without_jump(self, default_board: Board):
        prompt = get_house_prompt(default_board, 68)

        assert prompt is not None
        assert prompt.startswith("House 68 - Vaikuntha Loka: ")
        assert "Arrow" not in prompt
        assert "Snake" not in prompt

    def test_prompt_with_arrow(self, default_board: Board):
        prompt = get_house_prompt(default_board, 10)

        assert prompt is not None
        assert prompt.endswith("Arrow: climbs to house 23.")

    def test_prompt_with_snake(self, default_board: Board):
        prompt = get_house_prompt(default_board, 72)

        assert prompt is not None
        assert prompt.endswith("Snake: slides down to house 51.")

    def test_text_lines(self, default_board: Board):
        text = get_house_text(default_board, 12)

        assert text is not None
        lines = text.split("\n")
        assert lines[0] == "House 12 - Eirsha"
        assert lines[2].startswith("Reflection: ")
        assert lines[-1] == "Snake: slides down to house 8."

    def test_text_without_question(self, mini_board: Board):
        text = get_house_text(mini_board, 2)

        assert text == "House 2 - House 2\nDescription 2"

    def test_absent_house(self, default_board: Board):
        assert get_house_prompt(default_board, 99) is None
        assert get_house_text(default_board, 0) is None


class TestGridLayout:
    def test_first_row_runs_left_to_right(self, default_board: Board):
        cell = get_house_cell(default_board, 1)
        assert (cell.row, cell.col) == (0, 0)
        cell = get_house_cell(default_board, 9)
        assert (cell.row, cell.col) == (0, 8)

    def test_second_row_runs_right_to_left(self, default_board: Board):
        cell = get_house_cell(default_board, 10)
        assert (cell.row, cell.col) == (1, 8)
        cell = get_house_cell(default_board, 18)
        assert (cell.row, cell.col) == (1, 0)

    def test_last_house(self, default_board: Board):
        """Row 7 is odd, so house 72 sits in the top-left corner."""
        cell = get_house_cell(default_board, 72)
        assert (cell.row, cell.col) == (7, 0)

    def test_out_of_range(self, default_board: Board):
        assert get_house_cell(default_board, 0) is None
        assert get_house_cell(default_board, 73) is None

    def test_cells_in_drawing_order(self, default_board: Board):
        cells = iter_board_cells(default_board)

        assert len(cells) == 72
        assert sorted(c.house_number for c in cells) == list(range(1, 73))
        # Top row drawn first, left to right
        assert [c.house_number for c in cells[:9]] == list(range(72, 63, -1))
        assert [c.house_number for c in cells[-9:]] == list(range(1, 10))

    def test_cells_agree_with_lookup(self, default_board: Board):
        for cell in iter_board_cells(default_board):
            assert get_house_cell(default_board, cell.house_number) == cell
