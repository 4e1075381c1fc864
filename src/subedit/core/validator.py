"""Strict timing-line checks shared by the format validators."""

import re

from subedit.core.errors import ValidationError, ValidationErrorKind


def check_timing_line(
    line: str,
    start: re.Pattern[str],
    stop: re.Pattern[str],
    arrow: str = " --> ",
    pos: int = 0,
) -> None:
    """Check start time, arrow and stop time of one timing line, in order.

    ``start`` is matched at ``pos`` (the beginning of the line by default)
    and ``stop`` must match everything after the arrow.

    Raises:
        ValidationError: For the first part of the line that is malformed
    """
    found = start.match(line, pos)
    if found is None:
        raise ValidationError(ValidationErrorKind.START_TIME, line)
    if not line.startswith(arrow, found.end()):
        raise ValidationError(ValidationErrorKind.SEPARATOR, line)
    if stop.fullmatch(line, found.end() + len(arrow)) is None:
        raise ValidationError(ValidationErrorKind.STOP_TIME, line)
