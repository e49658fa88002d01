"""
Processor module - converts premium table CSVs into JSON and YAML files.
"""

from pathlib import Path
from typing import Optional

from .config import OUTPUT_SUFFIXES
from .logger import setup_logger
from .parsing import TableParser

logger = setup_logger(__name__)


def output_stem(csv_path: Path, effective_date: Optional[str]) -> str:
    """File name stem of the outputs, e.g. "tokyo-2024-04-01"."""
    return f"{csv_path.stem}-{effective_date or ''}"


def convert_file(csv_path: str | Path, effective_date: Optional[str] = None,
                 output_dir: Optional[str | Path] = None) -> tuple[Path, Path]:
    """
    Complete pipeline: Parse one CSV and write its JSON and YAML documents.

    Args:
        csv_path: Path to the CSV file
        effective_date: Effective date string like "2024.4"
        output_dir: Directory for the outputs (defaults to the CSV's directory)

    Returns:
        Tuple of (json_path, yaml_path)
    """
    csv_path = Path(csv_path)
    output_dir = Path(output_dir) if output_dir is not None else csv_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)

    table = TableParser(csv_path, effective_date)
    stem = output_stem(csv_path, table.premium_table.effective_date)

    json_suffix, yaml_suffix = OUTPUT_SUFFIXES
    json_path = output_dir / f"{stem}{json_suffix}"
    yaml_path = output_dir / f"{stem}{yaml_suffix}"

    yaml_path.write_text(table.to_yaml(), encoding="utf-8")
    json_path.write_text(table.to_json(), encoding="utf-8")

    logger.info(f"Wrote {json_path.name} and {yaml_path.name}")
    return json_path, yaml_path


def convert_directory(directory: str | Path, effective_date: Optional[str] = None) -> list[tuple[Path, Path]]:
    """
    Convert every CSV file directly inside a directory.

    Outputs are written next to their CSV. The first table that fails
    validation stops the run.

    Args:
        directory: Directory holding one CSV per area
        effective_date: Effective date string applied to every table

    Returns:
        List of (json_path, yaml_path) tuples, one per CSV

    Raises:
        NotADirectoryError: If directory is not a directory
        TableStructureError: If a table fails validation
        CellValueError: If a premium figure cannot be normalized
        ValueError: If a file cannot be read as CSV
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.error(f"Not a directory: {directory}")
        raise NotADirectoryError(f"Not a directory: {directory}")

    csv_files = sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == ".csv")
    if not csv_files:
        logger.warning(f"No CSV files found in {directory}")

    written = []
    for csv_path in csv_files:
        try:
            written.append(convert_file(csv_path, effective_date))
        except ValueError as e:
            logger.error(f"{csv_path.name}: {type(e).__name__}: {e}")
            raise

    logger.info(f"Converted {len(written)} premium tables in {directory}")
    return written
