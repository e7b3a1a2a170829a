"""Journey summary over a token's recorded moves."""

from collections import Counter
from collections.abc import Iterable

from app.schemas.move import HouseVisit, JourneySummary, MoveResult
from app.services.board import Board, get_default_board

from .completion import is_completed


def summarize_journey(
    moves: Iterable[MoveResult],
    board: Board | None = None,
    top_repeats: int = 5,
) -> JourneySummary:
    """Summarize moves in the order they were played.

    Rolls spent waiting at the gate are left out of the path. ``repeats``
    lists the most visited houses, ties broken by lowest house number.
    """
    if board is None:
        board = get_default_board()

    moves = list(moves)
    recorded = [move for move in moves if move.record_in_path]
    path = [move.to_house for move in recorded]

    # Highest count first, lowest house number on ties
    counts = Counter(path)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    repeats = [HouseVisit(house=house, count=count) for house, count in ranked[:top_repeats]]

    if moves:
        last = moves[-1]
        current_house = last.to_house
        completed = is_completed(last.to_index, last.has_started_after, board)
    else:
        current_house = board.rules.start_house
        completed = False

    return JourneySummary(
        path=path,
        repeats=repeats,
        jumps_taken=[move.applied_jump for move in recorded if move.applied_jump is not None],
        bounces=sum(1 for move in recorded if move.used_bounce),
        current_house=current_house,
        completed=completed,
    )
