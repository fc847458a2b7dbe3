"""Registration number allocation (COL{YYYY}{NNN}, e.g. COL2025001)."""
import re
from datetime import datetime
from typing import Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

PREFIX = "COL"
SEQUENCE_WIDTH = 3

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def registration_prefix(year: int) -> str:
    """Prefix shared by every registration number of a year."""
    return f"{PREFIX}{year}"


def format_registration_number(prefix: str, sequence: int) -> str:
    """
    Zero-pad the sequence to three digits.

    Sequences above 999 are not truncated; the suffix simply grows.
    """
    return f"{prefix}{sequence:0{SEQUENCE_WIDTH}d}"


def next_sequence(latest_reg_no: Optional[str]) -> int:
    """
    Sequence that follows the given registration number.

    Only the last three characters are read. A missing number, or a suffix
    that doesn't start with an integer, restarts the sequence at 1.
    """
    if not latest_reg_no:
        return 1
    match = _LEADING_INT.match(latest_reg_no[-SEQUENCE_WIDTH:])
    if not match:
        return 1
    return int(match.group(1)) + 1


def get_latest_registration_number(db: Session, prefix: str) -> Optional[str]:
    """Highest registration number (string order) carrying the prefix."""
    row = db.execute(
        text(
            """
            SELECT reg_no FROM students
             WHERE reg_no LIKE :pattern
             ORDER BY reg_no DESC
             LIMIT 1
            """
        ),
        {"pattern": f"{prefix}%"},
    ).fetchone()
    return row.reg_no if row else None


def generate_registration_number(db: Session, year: Optional[int] = None) -> str:
    """
    Next registration number for the year (defaults to the current year).

    Reads the latest number then increments it; nothing guards the gap
    between this read and the caller's insert. Store errors propagate.
    """
    if year is None:
        year = datetime.now().year
    prefix = registration_prefix(year)
    latest = get_latest_registration_number(db, prefix)
    return format_registration_number(prefix, next_sequence(latest))
