"""
CSV reading module for premium tables.
Loads the whole table once into a grid of string cells.
"""

import csv
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from ..config import CSV_ENCODING
from ..logger import setup_logger

logger = setup_logger(__name__)


def rows_to_frame(rows: Iterable[list], min_width: int = 0) -> pd.DataFrame:
    """
    Build a cell grid from ragged CSV rows.

    Empty cells and cells missing from short rows become None, every other
    cell stays the string it was in the file.

    Args:
        rows: CSV rows as lists of strings
        min_width: Minimum number of columns of the grid

    Returns:
        DataFrame with integer column labels and object dtype
    """
    rows = [[cell if cell != "" else None for cell in row] for row in rows]
    width = max([min_width] + [len(row) for row in rows])
    padded = [row + [None] * (width - len(row)) for row in rows]
    return pd.DataFrame(padded, columns=range(width), dtype=object)


def read_table_rows(filepath: str | Path, min_width: int = 0,
                    encoding: Optional[str] = None) -> pd.DataFrame:
    """
    Read a premium table CSV into a cell grid.

    Args:
        filepath: Path to the CSV file
        min_width: Minimum number of columns of the grid
        encoding: File encoding (defaults to UTF-8, BOM tolerated)

    Returns:
        DataFrame of string cells, one row per CSV line

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If the file cannot be decoded or parsed as CSV
    """
    filepath = Path(filepath)

    if not filepath.exists():
        logger.error(f"CSV file not found: {filepath}")
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    logger.info(f"Reading premium table: {filepath.name}")

    try:
        with open(filepath, newline="", encoding=encoding or CSV_ENCODING) as f:
            rows = list(csv.reader(f))
    except (UnicodeDecodeError, csv.Error) as e:
        logger.error(f"Failed to read CSV: {e}")
        raise ValueError(f"Invalid CSV file: {e}") from e

    frame = rows_to_frame(rows, min_width)
    logger.debug(f"CSV loaded: {len(frame)} rows, {len(frame.columns)} columns")
    return frame
