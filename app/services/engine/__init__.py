"""Movement engine module - pure functional move resolution.

This module provides the core engine with:
- apply_move() resolving a die roll through gate, bounce zone and jumps
- is_completed() for the return to the start house
- advance_token() / ProcessResult for turn-level processing with events
- summarize_journey() over recorded moves

Usage:
    from app.services.engine import apply_move, is_completed

    move = apply_move(position_index=67, dice=6, has_started=False)
    done = is_completed(move.to_index, move.has_started_after)
"""

# Bounce zone
from .bounce import reflect_in_zone, simulate_bounce

# Completion
from .completion import is_completed

# Events
from .events import (
    AnyMoveEvent,
    DiceRolled,
    JourneyCompleted,
    JumpApplied,
    MoveEvent,
    TokenBounced,
    TokenEnteredBoard,
    TokenMoved,
    WaitingAtGate,
)

# Journey
from .journey import summarize_journey

# Movement
from .movement import apply_move, resolve_bounce, resolve_jump, validate_move_input

# Rolling
from .rolling import advance_token, new_token, roll_dice

# Result types
from .validation import ProcessResult, ValidationResult, validate_roll

__all__ = [
    # Movement
    "apply_move",
    "resolve_bounce",
    "resolve_jump",
    "validate_move_input",
    "simulate_bounce",
    "reflect_in_zone",
    # Completion
    "is_completed",
    # Rolling
    "advance_token",
    "new_token",
    "roll_dice",
    # Journey
    "summarize_journey",
    # Events
    "MoveEvent",
    "AnyMoveEvent",
    "DiceRolled",
    "WaitingAtGate",
    "TokenEnteredBoard",
    "TokenMoved",
    "TokenBounced",
    "JumpApplied",
    "JourneyCompleted",
    # Validation
    "ProcessResult",
    "ValidationResult",
    "validate_roll",
]
