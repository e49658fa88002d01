"""
Structure validation for premium table CSVs.

Every check runs on the raw cell grid before any value is extracted, so a
table with shifted or swapped columns is rejected instead of producing
plausible but wrong figures.
"""

import re
from decimal import Decimal
from typing import Optional

import pandas as pd

from ..config import DEFAULT_LAYOUT, TableLayout
from ..exceptions import RankIndexError, RankMaxError, RankMinError, SalaryRateError
from ..logger import setup_logger
from .cells import cell_text, is_positive_cell, to_number

logger = setup_logger(__name__)

PARENTHESES = re.compile(r"[()（）]")


def starts_with_marker(value: Optional[str], markers: tuple[str, ...]) -> bool:
    """Whether a cell, parentheses removed, starts with a range separator."""
    value = cell_text(value)
    if value is None:
        return False
    return PARENTHESES.sub("", value).startswith(markers)


def find_separator_column(frame: pd.DataFrame, layout: TableLayout = DEFAULT_LAYOUT) -> Optional[int]:
    """
    Locate the column holding the range separator most often.

    Returns:
        Column index (first one on ties), or None if no cell holds a separator
    """
    counts = pd.Series({
        col: int(frame[col].map(lambda v: starts_with_marker(v, layout.range_markers)).sum())
        for col in frame.columns
    }, dtype=int)
    if counts.empty or counts.max() == 0:
        return None
    return int(counts.idxmax())


def check_range_separator(frame: pd.DataFrame, layout: TableLayout = DEFAULT_LAYOUT) -> int:
    """
    Check that the bound columns sit right next to the range separator.

    Args:
        frame: Cell grid of the whole CSV
        layout: Expected column layout

    Returns:
        Index of the separator column

    Raises:
        RankMinError: If the lower bound column is not left of the separator
        RankMaxError: If the upper bound column is not right of the separator
    """
    sep_idx = find_separator_column(frame, layout)
    if sep_idx is None:
        raise RankMinError("No range separator found in any column")

    count = frame[sep_idx].map(lambda v: starts_with_marker(v, layout.range_markers)).sum()
    logger.info(f"Range separator found @ column index {sep_idx} (count: {count})")

    if layout.rank_min != sep_idx - 1:
        raise RankMinError(
            f"Lower bound column {layout.rank_min} is not left of separator column {sep_idx}"
        )
    if layout.rank_max != sep_idx + 1:
        raise RankMaxError(
            f"Upper bound column {layout.rank_max} is not right of separator column {sep_idx}"
        )

    logger.info("Rank range index is validated with separator")
    return sep_idx


def check_rank_index(frame: pd.DataFrame, layout: TableLayout = DEFAULT_LAYOUT) -> None:
    """
    Check that the rank column holds enough rank-like cells.

    Raises:
        RankIndexError: If fewer than rank_count cells start with 1-9, or
            fewer than rank_count cells are short enough to be a rank
    """
    ranks = frame[layout.rank]

    numbered = int(ranks.map(is_positive_cell).sum())
    if numbered < layout.rank_count:
        raise RankIndexError(
            f"Only {numbered} numbered rank cells, expected at least {layout.rank_count}"
        )

    short = int(ranks.map(lambda v: cell_text(v) is not None and len(v) <= layout.max_rank_length).sum())
    if short < layout.rank_count:
        raise RankIndexError(
            f"Only {short} rank cells of at most {layout.max_rank_length} characters, "
            f"expected at least {layout.rank_count}"
        )

    logger.info("Rank index is validated")


def salary_rate_deviation(frame: pd.DataFrame, total: int, salary: int) -> Optional[Decimal]:
    """
    Mean relative deviation between a total column and twice its salary column.

    Only rows whose total starts with 1-9 take part.

    Returns:
        Mean of |total - 2 * salary| / total, or None if no row takes part
    """
    rows = frame[frame[total].map(is_positive_cell).astype(bool)]
    if rows.empty:
        return None

    ratios = [
        abs(to_number(t) - to_number(s) * 2) / to_number(t)
        for t, s in zip(rows[total], rows[salary])
    ]
    return sum(ratios, Decimal(0)) / len(ratios)


def check_salary_rate(frame: pd.DataFrame, total: int, salary: int,
                      layout: TableLayout = DEFAULT_LAYOUT) -> Decimal:
    """
    Check that the salary column is half of the total column.

    Args:
        frame: Cell grid of the whole CSV
        total: Column index of the total premium
        salary: Column index of the employee half
        layout: Layout carrying the tolerance

    Returns:
        The mean deviation found

    Raises:
        SalaryRateError: If the mean deviation exceeds the tolerance or the
            total column has no figures at all
    """
    deviation = salary_rate_deviation(frame, total, salary)
    if deviation is None:
        raise SalaryRateError(f"No premium figures in column {total}")
    if deviation > layout.salary_rate_tolerance:
        raise SalaryRateError(
            f"Columns {total}/{salary}: mean deviation {deviation:.4f} "
            f"exceeds {layout.salary_rate_tolerance}"
        )

    logger.info(f"Salary rate is validated for columns {total}/{salary} (deviation: {deviation:.4f})")
    return deviation


def validate_structure(frame: pd.DataFrame, layout: TableLayout = DEFAULT_LAYOUT) -> None:
    """Run every structure check; the first failure aborts."""
    check_range_separator(frame, layout)
    check_rank_index(frame, layout)
    for total, salary in layout.salary_pairs:
        check_salary_rate(frame, total, salary, layout)
