"""Board definitions: static house/jump tables, rules constants and lookups."""

from .loader import (
    DEFAULT_BOARD_FILE,
    Board,
    build_board,
    get_default_board,
    load_board,
    load_board_config,
    reload_default_board,
)
from .lookups import (
    get_house_by_number,
    get_house_cell,
    get_house_prompt,
    get_house_text,
    get_jump,
    get_jump_target,
    get_jump_type,
    iter_board_cells,
)
from .rules import compute_rules_constants

__all__ = [
    # Loading
    "Board",
    "DEFAULT_BOARD_FILE",
    "build_board",
    "load_board",
    "load_board_config",
    "get_default_board",
    "reload_default_board",
    "compute_rules_constants",
    # Lookups
    "get_house_by_number",
    "get_jump",
    "get_jump_target",
    "get_jump_type",
    "get_house_prompt",
    "get_house_text",
    "get_house_cell",
    "iter_board_cells",
]
