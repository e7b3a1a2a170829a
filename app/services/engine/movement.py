"""Movement resolution: gate, bounce zone and jumps.

apply_move() is pure: it reads the immutable board and the caller's token
state and returns a MoveResult. It never stores anything.
"""

import logging

from app.schemas.board import RulesConstants
from app.schemas.move import AppliedJump, MoveResult
from app.services.board import Board, get_default_board, get_jump
from app.services.errors import InvalidInput

from .bounce import simulate_bounce

logger = logging.getLogger(__name__)


def validate_move_input(
    position_index: int, dice: int, has_started: bool, rules: RulesConstants
) -> None:
    """Reject inputs outside the board's bounds.

    Raises:
        InvalidInput: If dice or position_index is not an in-range int, or
            has_started is not a bool.
    """
    if isinstance(dice, bool) or not isinstance(dice, int):
        raise InvalidInput(f"Dice must be an int, got {dice!r}", "INVALID_DICE")
    if not rules.min_dice <= dice <= rules.max_dice:
        raise InvalidInput(
            f"Dice must be between {rules.min_dice} and {rules.max_dice}, got {dice}",
            "INVALID_DICE",
        )
    if isinstance(position_index, bool) or not isinstance(position_index, int):
        raise InvalidInput(
            f"Position must be an int, got {position_index!r}", "INVALID_POSITION"
        )
    if not 0 <= position_index <= rules.max_index:
        raise InvalidInput(
            f"Position must be between 0 and {rules.max_index}, got {position_index}",
            "INVALID_POSITION",
        )
    if not isinstance(has_started, bool):
        raise InvalidInput(
            f"has_started must be a bool, got {has_started!r}", "INVALID_STARTED_FLAG"
        )


def resolve_bounce(position_index: int, dice: int, rules: RulesConstants) -> tuple[int, bool]:
    """Apply the bounce zone to a forward move.

    Returns:
        (index, used_bounce). The step simulation runs whenever the raw
        destination reaches the zone without landing exactly on its last cell.
    """
    raw = position_index + dice
    if raw < rules.bounce_start or raw == rules.bounce_end:
        return raw, False

    index = simulate_bounce(position_index, dice, rules.bounce_start, rules.bounce_end)
    logger.debug(
        "Bounce resolved: from=%d, dice=%d, raw=%d, landed=%d",
        position_index,
        dice,
        raw,
        index,
    )
    return index, True


def resolve_jump(index: int, board: Board) -> tuple[int, AppliedJump | None]:
    """Apply at most one jump from the house at ``index``.

    The jump target is never checked for a further jump.
    """
    jump = get_jump(board, index + 1)
    if jump is None:
        return index, None

    applied = AppliedJump(
        from_house=jump.from_house,
        to_house=jump.to_house,
        jump_type=jump.jump_type,
    )
    logger.debug(
        "Jump applied: %d -> %d (%s)",
        jump.from_house,
        jump.to_house,
        applied.jump_type.value,
    )
    return jump.to_house - 1, applied


def _clamp(index: int, rules: RulesConstants) -> int:
    clamped = min(max(index, 0), rules.max_index)
    if clamped != index:
        # Unreachable on a board that passed build_board() validation
        logger.error(
            "Destination index %d outside board, clamped to %d", index, clamped
        )
    return clamped


def apply_move(
    position_index: int,
    dice: int,
    has_started: bool,
    board: Board | None = None,
) -> MoveResult:
    """Resolve one die roll for a token.

    Case A, token still at the gate: a 6 enters the board at the start-on
    house; any other value leaves the token where it is and the roll is not
    recorded in the visited path.

    Case B, token already started: the move is resolved through the bounce
    zone first, then through at most one jump.

    Args:
        position_index: Current zero-based index of the token.
        dice: Die value (1-6).
        has_started: Whether the token has already left the gate.
        board: Board to play on; the process-wide board when omitted.

    Returns:
        MoveResult describing the move.

    Raises:
        InvalidInput: If dice or position_index is out of range.
    """
    if board is None:
        board = get_default_board()
    rules = board.rules
    validate_move_input(position_index, dice, has_started, rules)

    if not has_started:
        if dice != rules.gate_roll:
            logger.debug(
                "Waiting at gate: position=%d, dice=%d", position_index, dice
            )
            return MoveResult(
                from_index=position_index,
                from_house=position_index + 1,
                to_index=position_index,
                to_house=position_index + 1,
                dice=dice,
                has_started_before=False,
                has_started_after=False,
                record_in_path=False,
            )

        logger.debug(
            "Gate opened: position=%d, entering at index=%d",
            position_index,
            rules.start_on_index,
        )
        return MoveResult(
            from_index=position_index,
            from_house=position_index + 1,
            to_index=rules.start_on_index,
            to_house=rules.start_on_house,
            dice=dice,
            has_started_before=False,
            has_started_after=True,
            started_this_roll=True,
        )

    index, used_bounce = resolve_bounce(position_index, dice, rules)
    index, applied_jump = resolve_jump(index, board)
    index = _clamp(index, rules)

    logger.debug(
        "Move resolved: from=%d, dice=%d, to=%d, bounce=%s, jump=%s",
        position_index,
        dice,
        index,
        used_bounce,
        applied_jump is not None,
    )
    return MoveResult(
        from_index=position_index,
        from_house=position_index + 1,
        to_index=index,
        to_house=index + 1,
        dice=dice,
        has_started_before=True,
        has_started_after=True,
        used_bounce=used_bounce,
        applied_jump=applied_jump,
    )
