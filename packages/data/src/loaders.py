"""Tabular data loading.

This is the only module that reads observation files. Supported inputs:
CSV (.csv), tab-separated (.tsv, .tab), delimited text with a sniffed
separator (.txt), Excel workbooks (.xlsx, .xls; first sheet) and Parquet
(.parquet).
"""

import logging
from pathlib import Path

import pandas as pd

from .cleaning import extract_valid_numbers

logger = logging.getLogger(__name__)

RETURN_COLUMN_HINTS = ("return", "pnl", "value", "profit", "loss")

_WORKBOOK = (".xlsx", ".xls")

_DELIMITED = {
    ".csv": {"sep": ","},
    ".tsv": {"sep": "\t"},
    ".tab": {"sep": "\t"},
    ".txt": {"sep": None, "engine": "python"},
}


def load_table(path: str | Path) -> pd.DataFrame:
    """
    Load a table of observations.

    Parameters
    ----------
    path : str | Path
        Path to a CSV, TSV, text, Excel or Parquet file. The first row
        of delimited files and of the first workbook sheet is the header.

    Returns
    -------
    pd.DataFrame
        Table with a RangeIndex. Delimited files and workbooks are read as strings so
        currency symbols and parenthesis negatives reach the cleaner
        intact.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file type is not supported or the table is empty.

    Examples
    --------
    >>> df = load_table("data/strategy_pnl.csv")
    >>> df.columns.tolist()
    ['date', 'pnl']
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".parquet":
        df = pd.read_parquet(path)
    elif suffix in _WORKBOOK:
        df = pd.read_excel(path, sheet_name=0, dtype=str, keep_default_na=False)
    elif suffix in _DELIMITED:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            **_DELIMITED[suffix],
        )
    else:
        raise ValueError(
            f"Unsupported file type '{suffix}'; expected one of "
            f"{sorted([*_DELIMITED, *_WORKBOOK, '.parquet'])}"
        )

    if df.empty:
        raise ValueError(f"No data found in {path}")

    df.columns = [
        str(col).strip() or f"Column {i + 1}" for i, col in enumerate(df.columns)
    ]
    df = df.reset_index(drop=True)

    logger.info("Loaded %d rows x %d columns from %s", len(df), df.shape[1], path)
    return df


def suggest_column(headers: list[str]) -> str:
    """
    Pick the column most likely to hold returns.

    Parameters
    ----------
    headers : list[str]
        Column names in file order.

    Returns
    -------
    str
        First header containing one of RETURN_COLUMN_HINTS
        (case-insensitive), else the first header.

    Raises
    ------
    ValueError
        If there are no headers.
    """
    if not headers:
        raise ValueError("Cannot suggest a column from an empty header list")
    for header in headers:
        lowered = str(header).lower()
        if any(hint in lowered for hint in RETURN_COLUMN_HINTS):
            return header
    return headers[0]


def load_observations(
    path: str | Path,
    column: str | int | None = None,
) -> list[float]:
    """
    Load one column of a file as cleaned numeric observations.

    Parameters
    ----------
    path : str | Path
        File to read (see load_table).
    column : str | int | None
        Column name or position. None uses suggest_column.

    Returns
    -------
    list[float]
        Observations in file order, non-numeric cells dropped.
    """
    df = load_table(path)
    if column is None:
        column = suggest_column(list(df.columns))
        logger.info("Using column %r from %s", column, path)
    return extract_valid_numbers(df, column)
