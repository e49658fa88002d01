"""
Cell-level normalization for premium table CSVs.
Handles rank cells, premium figures and effective date strings.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Optional

from ..config import DATE_OUTPUT_FORMAT
from ..exceptions import CellValueError, RankIndexError
from ..logger import setup_logger

logger = setup_logger(__name__)

POSITIVE_LEAD = re.compile(r"[1-9]")
RANK_PATTERN = re.compile(r"([0-9]+)[^0-9]*([0-9]+)?")
LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
LEADING_NUMBER = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))")
DATE_PATTERN = re.compile(r"([0-9]{4})[^0-9\s]([0-9]{1,2})")

ONE_DECIMAL = Decimal("0.1")


def cell_text(value) -> Optional[str]:
    """The cell as a string, or None for empty and missing (NaN) cells."""
    return value if isinstance(value, str) and value != "" else None


def is_positive_cell(value: Optional[str]) -> bool:
    """Whether a cell starts with a non-zero digit."""
    value = cell_text(value)
    return value is not None and POSITIVE_LEAD.match(value) is not None


def fix_float(value: Optional[str]) -> Optional[str]:
    """
    Round a decimal string to one fractional digit.

    Uses banker's rounding (round half to even) on an exact decimal value.
    Strings without a fractional part are returned unchanged.

    Args:
        value: Cell string like "5788.40", "16104" or None

    Returns:
        Normalized string like "5788.4", or the input when there is nothing to round

    Raises:
        CellValueError: If the cell has a '.' but is not a decimal number
    """
    value = cell_text(value)
    if value is None or "." not in value:
        return value
    try:
        number = Decimal(value.strip())
        if not number.is_finite():
            raise InvalidOperation(value)
        rounded = number.quantize(ONE_DECIMAL, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as e:
        logger.error(f"Cannot round cell value: '{value}'")
        raise CellValueError(f"Not a decimal number: {value}") from e
    return format(rounded, "f")


def purify_num(value: Optional[str]) -> Optional[str]:
    """Like fix_float, but cells not starting with 1-9 become None."""
    return fix_float(value) if is_positive_cell(value) else None


def to_int(value: Optional[str]) -> int:
    """Parse the leading integer of a cell; 0 when there is none."""
    match = LEADING_INT.match(cell_text(value) or "")
    return int(match.group(1)) if match else 0


def to_number(value: Optional[str]) -> Decimal:
    """Parse the leading decimal number of a cell; 0 when there is none."""
    match = LEADING_NUMBER.match(cell_text(value) or "")
    return Decimal(match.group(1)) if match else Decimal(0)


def parse_rank(value: Optional[str]) -> tuple[int, Optional[int]]:
    """
    Split a rank cell into insurance rank and pension rank.

    The first run of digits is the insurance rank; a second run, separated
    by non-digits, is the pension rank.

    Args:
        value: Rank cell like "12", "4(1)" or "35（32）"

    Returns:
        Tuple of (rank, pension_rank); pension_rank is None when absent

    Raises:
        RankIndexError: If the cell holds no digits at all
    """
    match = RANK_PATTERN.search(cell_text(value) or "")
    if match is None:
        raise RankIndexError(f"Rank cell without a rank number: {value!r}")
    rank, pension_rank = match.groups()
    return int(rank), None if pension_rank is None else int(pension_rank)


def parse_effective_date(date_str: Optional[str]) -> Optional[str]:
    """
    Derive the effective date from a "YYYY.M" style string.

    Args:
        date_str: String like "2024.4", "2024-04" or "2023年4月"

    Returns:
        Date string like "2024-04-01", or None if it cannot be parsed
    """
    if not date_str:
        return None

    match = DATE_PATTERN.match(date_str.strip())
    if match is None:
        logger.warning(f"Ignoring unparsable effective date: '{date_str}'")
        return None

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        logger.warning(f"Ignoring effective date with invalid month: '{date_str}'")
        return None

    return DATE_OUTPUT_FORMAT.format(year=year, month=month)
