"""
Premium table parsing module.
Validates the CSV layout, locates the rank rows and extracts them into a
PremiumTable.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from ..config import DEFAULT_LAYOUT, TableLayout
from ..exceptions import RankIndexError
from ..export import to_json, to_yaml
from ..logger import setup_logger, log_table_stats
from ..models import PremiumTable, RankEntry
from .cells import cell_text, fix_float, parse_effective_date, parse_rank, purify_num, to_int
from .reader import read_table_rows
from .structure import validate_structure

logger = setup_logger(__name__)

PENSION_FIELDS = ('pension_rank', 'pension_total', 'pension_salary')


def locate_row_range(frame: pd.DataFrame, layout: TableLayout = DEFAULT_LAYOUT) -> tuple[int, int]:
    """
    Find the rows holding rank 1 through the last rank.

    The last "1" seen before the final rank wins; scanning stops at the
    first row whose rank cell is the final rank.

    Args:
        frame: Cell grid of the whole CSV
        layout: Column layout

    Returns:
        Tuple of (start_row, end_row), both inclusive

    Raises:
        RankIndexError: If either bound is missing
    """
    first, last = "1", str(layout.rank_count)
    start_row = end_row = None

    for i, value in enumerate(frame[layout.rank]):
        if value == first:
            start_row = i
        if value == last:
            end_row = i
            break

    if start_row is None or end_row is None:
        raise RankIndexError(f"Rank rows {first}..{last} not found")

    logger.debug(f"Rank rows located: {start_row}..{end_row}")
    return start_row, end_row


def extract_entry(row: Sequence[Optional[str]], layout: TableLayout = DEFAULT_LAYOUT) -> RankEntry:
    """Convert one CSV row into a RankEntry, pension fields not yet backfilled."""
    rank, pension_rank = parse_rank(row[layout.rank])
    return RankEntry(
        rank=rank,
        pension_rank=pension_rank,
        label=cell_text(row[layout.label]),
        rank_min=to_int(row[layout.rank_min]),
        rank_max=to_int(row[layout.rank_max]),
        insurance_younger_total=fix_float(row[layout.insurance_younger_total]),
        insurance_younger_salary=fix_float(row[layout.insurance_younger_salary]),
        insurance_elder_total=fix_float(row[layout.insurance_elder_total]),
        insurance_elder_salary=fix_float(row[layout.insurance_elder_salary]),
        pension_total=purify_num(row[layout.pension_total]),
        pension_salary=purify_num(row[layout.pension_salary]),
    )


def extract_rows(frame: pd.DataFrame, start_row: int, end_row: int,
                 layout: TableLayout = DEFAULT_LAYOUT) -> list[RankEntry]:
    """
    Extract every row in [start_row, end_row].

    Raises:
        RankIndexError: If the extracted ranks are not exactly 1..rank_count
    """
    entries = [
        extract_entry(row, layout)
        for row in frame.iloc[start_row:end_row + 1].itertuples(index=False, name=None)
    ]

    ranks = [entry.rank for entry in entries]
    expected = list(range(1, layout.rank_count + 1))
    if ranks != expected:
        raise RankIndexError(f"Rank rows are not 1..{layout.rank_count} in order: {ranks}")

    return entries


def backfill_pension(entries: list[RankEntry]) -> list[RankEntry]:
    """
    Fill missing pension fields from the observed ones.

    Tables print pension figures only for the middle ranks. Rows in the upper
    half of the table take the first observed value, rows in the lower half
    take the last one.

    Args:
        entries: Extracted rank entries in table order

    Returns:
        New list of entries with pension fields populated where possible
    """
    observed = {
        name: [getattr(entry, name) for entry in entries if getattr(entry, name) is not None]
        for name in PENSION_FIELDS
    }
    for name, values in observed.items():
        if not values:
            logger.warning(f"No {name} values in table, leaving them empty")

    filled = []
    for i, entry in enumerate(entries):
        upper_half = i * 2 < len(entries)
        changes = {}
        for name, values in observed.items():
            if getattr(entry, name) is None and values:
                changes[name] = values[0] if upper_half else values[-1]
        filled.append(replace(entry, **changes) if changes else entry)

    backfilled = sum(1 for old, new in zip(entries, filled) if old is not new)
    logger.debug(f"Backfilled pension fields of {backfilled} ranks")
    return filled


class TableParser:
    """
    Parse a premium table CSV into a validated PremiumTable.

    The table is fully built on construction: structure validation, row
    range detection, extraction and pension backfill. Any failure raises
    before a table exists.
    """

    def __init__(self, file_path: str | Path, effective_date: Optional[str] = None,
                 layout: TableLayout = DEFAULT_LAYOUT):
        self.file_path = Path(file_path)
        self.layout = layout

        frame = read_table_rows(self.file_path, min_width=layout.width)

        validate_structure(frame, layout)
        self.start_row, self.end_row = locate_row_range(frame, layout)

        entries = extract_rows(frame, self.start_row, self.end_row, layout)
        entries = backfill_pension(entries)

        self.premium_table = PremiumTable(
            area=self.file_path.stem,
            effective_date=parse_effective_date(effective_date),
            fee=tuple(entries),
        )
        log_table_stats(self.premium_table, logger, f"Parsed {self.file_path.name}")

    def to_dict(self) -> dict:
        return self.premium_table.to_dict()

    def to_json(self) -> str:
        return to_json(self.premium_table)

    def to_yaml(self) -> str:
        return to_yaml(self.premium_table)
