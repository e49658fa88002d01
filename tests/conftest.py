"""
Pytest configuration and fixtures
"""
import csv
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Standard monthly remuneration per rank
STANDARD_REMUNERATION = [
    58000, 68000, 78000, 88000, 98000, 104000, 110000, 118000, 126000, 134000,
    142000, 150000, 160000, 170000, 180000, 190000, 200000, 220000, 240000, 260000,
    280000, 300000, 320000, 340000, 360000, 380000, 410000, 440000, 470000, 500000,
    530000, 560000, 590000, 620000, 650000, 680000, 710000, 750000, 790000, 830000,
    880000, 930000, 980000, 1030000, 1090000, 1150000, 1210000, 1270000, 1330000, 1390000,
]
YOUNGER_RATE = Decimal("0.0998")
ELDER_RATE = Decimal("0.1158")
PENSION_RATE = Decimal("0.183")
# Ranks printing pension figures; pension rank = rank - 3
PENSION_RANKS = range(4, 36)


def premium(standard: int, rate: Decimal) -> list[str]:
    """Total and employee half, printed with two decimals."""
    total = (Decimal(standard) * rate).quantize(Decimal("0.01"))
    return [str(total), str((total / 2).quantize(Decimal("0.01")))]


def build_table_rows() -> list[list[str]]:
    """A premium table as exported from the published spreadsheet."""
    rows = [
        ["令和6年4月分からの健康保険・厚生年金保険の保険料額表", "", "", "", "", "", "", "", "", "", ""],
        ["等級", "標準報酬", "報酬月額", "", "", "介護保険第2号被保険者に該当しない場合", "",
         "介護保険第2号被保険者に該当する場合", "", "厚生年金保険料", ""],
        ["", "月額", "円以上", "", "円未満", "全額", "折半額", "全額", "折半額", "全額", "折半額"],
    ]
    for i, standard in enumerate(STANDARD_REMUNERATION):
        rank = i + 1
        lower = (STANDARD_REMUNERATION[i - 1] + standard) // 2 if i > 0 else None
        upper = (standard + STANDARD_REMUNERATION[i + 1]) // 2 if rank < 50 else None

        rank_cell = f"{rank}({rank - 3})" if rank in PENSION_RANKS else str(rank)
        pension = premium(standard, PENSION_RATE) if rank in PENSION_RANKS else ["", ""]
        rows.append(
            [rank_cell, f"{standard:,}", str(lower or ""), "～", str(upper or "")]
            + premium(standard, YOUNGER_RATE)
            + premium(standard, ELDER_RATE)
            + pension
        )
    rows.append(["※ 等級欄の( )内の数字は、厚生年金保険の標準報酬月額等級です。"])
    return rows


@pytest.fixture
def table_rows():
    """Fresh, mutable rows of a valid premium table."""
    return build_table_rows()


@pytest.fixture
def write_csv(tmp_path):
    """Factory writing rows into a CSV file under tmp_path."""
    def _write(rows, name="tokyo.csv", directory=None):
        path = Path(directory or tmp_path) / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerows(rows)
        return path
    return _write


@pytest.fixture
def table_csv(write_csv, table_rows):
    """Path to a valid premium table CSV."""
    return write_csv(table_rows)
