"""Parsing package for premium table CSV ingestion and validation."""

from .cells import fix_float, purify_num, parse_rank, parse_effective_date
from .reader import read_table_rows, rows_to_frame
from .structure import validate_structure
from .table_parser import TableParser, locate_row_range, extract_rows, backfill_pension
