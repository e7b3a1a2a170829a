"""Board lookups and presentation helpers.

Unknown house numbers yield None; callers treat that as "no special rule".
"""

from app.schemas.board import BoardCell, House, Jump, JumpType

from .loader import Board


def get_house_by_number(board: Board, number: int) -> House | None:
    return board.houses.get(number)


def get_jump(board: Board, from_house: int) -> Jump | None:
    return board.jumps.get(from_house)


def get_jump_target(board: Board, from_house: int) -> int | None:
    jump = board.jumps.get(from_house)
    return jump.to_house if jump is not None else None


def get_jump_type(board: Board, from_house: int) -> JumpType | None:
    jump = board.jumps.get(from_house)
    return jump.jump_type if jump is not None else None


def _jump_note(jump: Jump) -> str:
    if jump.jump_type == JumpType.FORWARD:
        return f"Arrow: climbs to house {jump.to_house}."
    return f"Snake: slides down to house {jump.to_house}."


def get_house_prompt(board: Board, number: int) -> str | None:
    """One-line prompt for a house, e.g. for a notification or log entry.

    Presentation only; gameplay never reads it.
    """
    house = get_house_by_number(board, number)
    if house is None:
        return None

    prompt = f"House {house.number} - {house.title}: {house.description}"
    jump = get_jump(board, number)
    if jump is not None:
        prompt = f"{prompt} {_jump_note(jump)}"
    return prompt


def get_house_text(board: Board, number: int) -> str | None:
    """Multi-line text for a house panel."""
    house = get_house_by_number(board, number)
    if house is None:
        return None

    lines = [f"House {house.number} - {house.title}", house.description]
    if house.question:
        lines.append(f"Reflection: {house.question}")
    jump = get_jump(board, number)
    if jump is not None:
        lines.append(_jump_note(jump))
    return "\n".join(lines)


def get_house_cell(board: Board, number: int) -> BoardCell | None:
    """Grid position of a house on the serpentine layout.

    Row 0 is the bottom row. Even rows run left to right, odd rows right to
    left, so consecutive houses are always adjacent.
    """
    rules = board.rules
    if not 1 <= number <= rules.total_cells:
        return None

    index = number - 1
    row, offset = divmod(index, rules.cols)
    col = offset if row % 2 == 0 else rules.cols - 1 - offset
    return BoardCell(house_number=number, row=row, col=col)


def iter_board_cells(board: Board) -> list[BoardCell]:
    """Every cell in drawing order: top row first, left to right."""
    rules = board.rules
    cells: list[BoardCell] = []
    for row in range(rules.rows - 1, -1, -1):
        for col in range(rules.cols):
            offset = col if row % 2 == 0 else rules.cols - 1 - col
            cells.append(BoardCell(house_number=row * rules.cols + offset + 1, row=row, col=col))
    return cells
