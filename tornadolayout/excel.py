import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import polars as pl
from fastexcel import read_excel

from .datasource import from_frame
from .model import CategoricalResult


logger = logging.getLogger(__name__)


def load_sheet(filepath: Union[str, Path], sheet: Optional[str] = None) -> pl.DataFrame:
    """Load one sheet (the first by default) into a polars DataFrame.

    The first row holds the column headers.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    try:
        excel_file = read_excel(str(filepath))
        sheet_name = sheet if sheet is not None else excel_file.sheet_names[0]
        df = excel_file.load_sheet_by_name(sheet_name).to_polars()
    except Exception as e:
        raise ValueError(f"Error reading Excel file: {e}")

    logger.debug("Loaded sheet '%s' from %s: %d rows", sheet_name, filepath, df.height)
    return df


def read_excel_result(
    filepath: Union[str, Path],
    sheet: Optional[str] = None,
    category: Optional[str] = None,
    values: Optional[List[str]] = None,
    objects: Optional[Dict[str, Any]] = None
) -> CategoricalResult:
    """Read a tornado chart result from an Excel sheet.

    Args:
        filepath: Path to Excel file
        sheet: Sheet name (defaults to the first sheet)
        category: Category column (defaults to the first column)
        values: Value columns (defaults to the numeric columns)
        objects: Optional property bag

    Returns:
        CategoricalResult ready for the normalizer

    Examples:
        result = read_excel_result("sensitivity.xlsx", sheet="Tornado")
        geometry = TornadoChart().update(result, Viewport(600, 400))
    """
    df = load_sheet(filepath, sheet)
    return from_frame(df, category=category, values=values, objects=objects)
