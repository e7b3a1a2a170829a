"""Reflection inside the bounce zone at the end of the track."""


def simulate_bounce(start: int, steps: int, zone_start: int, zone_end: int) -> int:
    """Walk ``steps`` cells from ``start``, reflecting off the zone walls.

    Motion begins forward. Before each step the direction flips to backward
    when the token stands on ``zone_end``, and back to forward when it stands
    on ``zone_start`` while moving backward. ``start`` must not exceed
    ``zone_end``.

    Args:
        start: Zero-based index the token moves from.
        steps: Number of cells to move (the die value).
        zone_start: First index of the bounce zone (inclusive).
        zone_end: Last index of the bounce zone (inclusive).

    Returns:
        The zero-based index where the token stops.
    """
    position = start
    direction = 1
    for _ in range(steps):
        if position == zone_end:
            direction = -1
        elif direction == -1 and position == zone_start:
            direction = 1
        position += direction
    return position


def reflect_in_zone(start: int, steps: int, zone_start: int, zone_end: int) -> int:
    """Closed-form equivalent of simulate_bounce.

    Unfolds the corridor into a line with period ``2 * (zone_end - zone_start)``.
    """
    raw = start + steps
    if raw <= zone_end:
        return raw

    span = zone_end - zone_start
    offset = (raw - zone_start) % (2 * span)
    if offset <= span:
        return zone_start + offset
    return zone_start + 2 * span - offset
