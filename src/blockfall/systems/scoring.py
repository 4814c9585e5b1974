"""Score, level and gravity speed rules."""
from blockfall.components.session import Session
from blockfall.constants import (
    BASE_DROP_INTERVAL_MS,
    DROP_INTERVAL_STEP_MS,
    LINE_CLEAR_POINTS,
    LINES_PER_LEVEL,
    MIN_DROP_INTERVAL_MS,
)


def line_clear_score(count: int, level: int) -> int:
    return count * LINE_CLEAR_POINTS * level


def level_for_lines(lines: int) -> int:
    return lines // LINES_PER_LEVEL + 1


def drop_interval_for_level(level: int) -> int:
    return max(MIN_DROP_INTERVAL_MS, BASE_DROP_INTERVAL_MS - (level - 1) * DROP_INTERVAL_STEP_MS)


def apply_line_clear(session: Session, count: int) -> int:
    """Award points for ``count`` cleared rows at the current level, then level up.

    Returns the points awarded.
    """
    if count <= 0:
        return 0
    points = line_clear_score(count, session.level)
    session.score += points
    session.lines += count
    session.level = level_for_lines(session.lines)
    session.drop_interval_ms = drop_interval_for_level(session.level)
    return points
