"""Roll processing: dice, token progress and move events."""

import logging
import random

from app.schemas.move import MoveResult, TokenProgress
from app.services.board import Board, get_default_board

from .completion import is_completed
from .events import (
    AnyMoveEvent,
    DiceRolled,
    JourneyCompleted,
    JumpApplied,
    TokenBounced,
    TokenEnteredBoard,
    TokenMoved,
    WaitingAtGate,
)
from .movement import apply_move
from .validation import ProcessResult, validate_roll

logger = logging.getLogger(__name__)


def roll_dice(rng: random.Random | None = None) -> int:
    """Roll a six-sided die."""
    return (rng or random).randint(1, 6)


def new_token(board: Board | None = None) -> TokenProgress:
    """A token waiting at the gate."""
    if board is None:
        board = get_default_board()
    return TokenProgress(position_index=board.rules.start_index)


def _build_events(
    token: TokenProgress,
    move: MoveResult,
    completed: bool,
) -> list[AnyMoveEvent]:
    events: list[AnyMoveEvent] = [
        DiceRolled(value=move.dice, roll_number=token.roll_count_total)
    ]

    if not move.has_started_before:
        if move.started_this_roll:
            events.append(
                TokenEnteredBoard(
                    from_house=move.from_house,
                    to_house=move.to_house,
                    rolls_until_start=token.roll_count_until_start,
                )
            )
        else:
            events.append(
                WaitingAtGate(
                    house=move.from_house,
                    rolls_until_start=token.roll_count_until_start,
                )
            )
        return events

    events.append(
        TokenMoved(
            from_house=move.from_house,
            to_house=move.to_house,
            roll_used=move.dice,
        )
    )
    if move.used_bounce:
        landed_house = move.applied_jump.from_house if move.applied_jump else move.to_house
        events.append(
            TokenBounced(raw_house=move.from_house + move.dice, landed_house=landed_house)
        )
    if move.applied_jump is not None:
        events.append(
            JumpApplied(
                from_house=move.applied_jump.from_house,
                to_house=move.applied_jump.to_house,
                jump_type=move.applied_jump.jump_type,
            )
        )
    if completed:
        events.append(
            JourneyCompleted(house=move.to_house, roll_count_total=token.roll_count_total)
        )
    return events


def advance_token(
    token: TokenProgress,
    dice: int,
    board: Board | None = None,
    first_seq: int = 0,
) -> ProcessResult:
    """Resolve a roll for a token and return its updated progress.

    Handles:
    - Rejecting rolls for completed tokens or out-of-range input
    - Counting rolls, and rolls spent waiting at the gate
    - Marking the token completed when it returns to the start house
    - Emitting move events numbered from ``first_seq``

    Args:
        token: Current token state (owned by the caller).
        dice: The die value (1-6).
        board: Board to play on; the process-wide board when omitted.
        first_seq: Sequence number for the first emitted event.

    Returns:
        ProcessResult with the new token state, the MoveResult and events.
    """
    if board is None:
        board = get_default_board()

    validation = validate_roll(token, dice, board)
    if not validation.is_valid:
        return ProcessResult.failure(
            validation.error_code or "VALIDATION_ERROR",
            validation.error_message or "Invalid roll",
        )

    move = apply_move(token.position_index, dice, token.has_started, board)
    completed = is_completed(move.to_index, move.has_started_after, board)

    new_token_state = token.model_copy(
        update={
            "position_index": move.to_index,
            "has_started": move.has_started_after,
            "has_completed": completed,
            "roll_count_total": token.roll_count_total + 1,
            "roll_count_until_start": (
                token.roll_count_until_start
                if move.has_started_before
                else token.roll_count_until_start + 1
            ),
        }
    )

    events = _build_events(new_token_state, move, completed)
    for seq, event in enumerate(events, start=first_seq):
        event.seq = seq

    if completed:
        logger.info(
            "Journey completed after %d rolls", new_token_state.roll_count_total
        )
    logger.debug(
        "Roll processed: dice=%d, from=%d, to=%d, events=%s",
        dice,
        move.from_house,
        move.to_house,
        [type(e).__name__ for e in events],
    )
    return ProcessResult.ok(new_token_state, move, events)
