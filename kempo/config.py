"""
Configuration constants for the premium table converter.
Centralized configuration for the CSV layout, thresholds and logging.
"""

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class TableLayout:
    """
    Fixed column layout of a premium table CSV.

    Attributes:
        rank: Column holding the rank cell ("4(1)" = insurance rank 4, pension rank 1)
        label: Column holding the standard monthly remuneration label
        rank_min: Lower bound of the remuneration bracket
        rank_max: Upper bound of the remuneration bracket
        insurance_younger_total: Health insurance premium, total (no nursing care)
        insurance_younger_salary: Health insurance premium, employee half
        insurance_elder_total: Health insurance premium, total (nursing care, age 40-64)
        insurance_elder_salary: Health insurance premium, employee half
        pension_total: Welfare pension premium, total
        pension_salary: Welfare pension premium, employee half
        rank_count: Number of ranks a complete table carries
        max_rank_length: Longest string a rank cell may have
        salary_rate_tolerance: Allowed mean deviation between total and 2x salary
        range_markers: Glyphs separating the bracket bounds
    """
    rank: int = 0
    label: int = 1
    rank_min: int = 2
    rank_max: int = 4
    insurance_younger_total: int = 5
    insurance_younger_salary: int = 6
    insurance_elder_total: int = 7
    insurance_elder_salary: int = 8
    pension_total: int = 9
    pension_salary: int = 10
    rank_count: int = 50
    max_rank_length: int = 6
    salary_rate_tolerance: Decimal = Decimal("0.03")
    range_markers: Tuple[str, ...] = ("～", "〜")

    @property
    def width(self) -> int:
        """Minimum number of columns a table must have."""
        return max(
            self.rank, self.label, self.rank_min, self.rank_max,
            self.insurance_younger_total, self.insurance_younger_salary,
            self.insurance_elder_total, self.insurance_elder_salary,
            self.pension_total, self.pension_salary,
        ) + 1

    @property
    def salary_pairs(self) -> Tuple[Tuple[int, int], ...]:
        """(total, salary) column pairs checked for the 2x salary rate."""
        return (
            (self.insurance_younger_total, self.insurance_younger_salary),
            (self.insurance_elder_total, self.insurance_elder_salary),
            (self.pension_total, self.pension_salary),
        )


DEFAULT_LAYOUT = TableLayout()

# Input
CSV_ENCODING = "utf-8-sig"  # tolerates a leading BOM from spreadsheet exports

# Date Formats
DATE_OUTPUT_FORMAT = "{year:04d}-{month:02d}-01"

# Output
OUTPUT_SUFFIXES = (".json", ".yaml")

# Logging
LOG_LEVEL = os.environ.get("KEMPO_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DIR = Path(os.environ.get("KEMPO_LOG_DIR", Path(__file__).parent.parent / "logs"))
