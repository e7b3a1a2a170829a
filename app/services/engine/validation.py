"""Validation layer for rolls and the ProcessResult pattern.

Separates validation from processing logic:
- validate_roll() checks a roll against the token and the board
- ProcessResult replaces exceptions for turn-level control flow
"""

import logging
from dataclasses import dataclass, field

from app.schemas.move import MoveResult, TokenProgress
from app.services.board import Board

from .events import AnyMoveEvent

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Result of processing a roll.

    Provides explicit success/failure with error codes suitable for client
    localization.
    """

    token: TokenProgress | None = None
    move: MoveResult | None = None
    events: list[AnyMoveEvent] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        token: TokenProgress,
        move: MoveResult,
        events: list[AnyMoveEvent] | None = None,
    ) -> "ProcessResult":
        """Create a successful result with the new token state and events."""
        return cls(
            token=token,
            move=move,
            events=events or [],
            success=True,
        )

    @classmethod
    def failure(cls, code: str, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            token=None,
            move=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of validating a roll before processing."""

    is_valid: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: str, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )


def validate_roll(token: TokenProgress, dice: int, board: Board) -> ValidationResult:
    """Validate a roll before processing.

    Checks:
    - The token has not already completed its circuit
    - The die value is within the board's dice range
    - The token sits on a valid board index

    Args:
        token: Current token state.
        dice: The rolled value.
        board: Board being played.

    Returns:
        ValidationResult indicating success or failure with error details.
    """
    rules = board.rules
    logger.debug(
        "Validating roll: position=%d, started=%s, dice=%s",
        token.position_index,
        token.has_started,
        dice,
    )

    if token.has_completed:
        logger.warning("Validation failed: TOKEN_ALREADY_COMPLETED")
        return ValidationResult.error(
            "TOKEN_ALREADY_COMPLETED",
            "Token has already completed the journey",
        )

    if isinstance(dice, bool) or not isinstance(dice, int) or not (
        rules.min_dice <= dice <= rules.max_dice
    ):
        logger.warning("Validation failed: INVALID_DICE, dice=%r", dice)
        return ValidationResult.error(
            "INVALID_DICE",
            f"Dice must be between {rules.min_dice} and {rules.max_dice}",
        )

    if token.position_index > rules.max_index:
        logger.warning(
            "Validation failed: INVALID_POSITION, position=%d, max=%d",
            token.position_index,
            rules.max_index,
        )
        return ValidationResult.error(
            "INVALID_POSITION",
            f"Position must be between 0 and {rules.max_index}",
        )

    logger.debug("Roll validated successfully")
    return ValidationResult.ok()
