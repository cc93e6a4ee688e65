"""Tabular input loading for batch decoding."""

from pathlib import Path

import pandas as pd

_EXCEL_SUFFIXES = {".xlsx", ".xls"}


def read_table(path: Path, *, text_cols: list[str] | None = None) -> pd.DataFrame:
    """
    Read a CSV or Excel file holding instrument rows.

    Columns listed in `text_cols` are read as text, so a code such as "NA..."
    is never turned into a missing value and digits are never parsed as numbers.
    Header names are stripped of surrounding whitespace.

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If the extension is not .csv, .xlsx or .xls
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()
    dtype = {col: str for col in text_cols} if text_cols else None

    if suffix in _EXCEL_SUFFIXES:
        df = pd.read_excel(path, dtype=dtype)  # needs the `excel` extra (openpyxl)
    elif suffix == ".csv":
        df = pd.read_csv(path, dtype=dtype, keep_default_na=False, na_values=[""])
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .xlsx, .xls, .csv")

    df.columns = [str(c).strip() for c in df.columns]
    return df
