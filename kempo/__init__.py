"""
Premium table converter - turns health insurance premium table CSVs into
validated JSON and YAML documents.
"""

from .config import DEFAULT_LAYOUT, TableLayout
from .exceptions import (
    CellValueError,
    RankIndexError,
    RankMaxError,
    RankMinError,
    SalaryRateError,
    TableStructureError,
)
from .models import PremiumTable, RankEntry
from .parsing import TableParser

__all__ = [
    'DEFAULT_LAYOUT',
    'TableLayout',
    'CellValueError',
    'RankIndexError',
    'RankMaxError',
    'RankMinError',
    'SalaryRateError',
    'TableStructureError',
    'PremiumTable',
    'RankEntry',
    'TableParser',
]
