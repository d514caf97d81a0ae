"""Numeric cleaning for spreadsheet-style return columns.

Cells arrive as text such as "$1,234.50", "(250)" or "3.5%". This module
turns them into floats and drops anything that is not a number.
"""

import logging
import math
import re
from numbers import Number
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)

# Currency symbols, whitespace (incl. non-breaking) and thousands separators
_STRIP_PATTERN = re.compile(r"[$£€¥\s,]")


def clean_numeric_value(value: Any) -> float | None:
    """
    Convert one cell into a float.

    Parameters
    ----------
    value : Any
        Raw cell content.

    Returns
    -------
    float | None
        Parsed number, or None for blank/unparsable cells.

    Examples
    --------
    >>> clean_numeric_value("$1,234.50")
    1234.5
    >>> clean_numeric_value("(250)")
    -250.0
    >>> clean_numeric_value("n/a") is None
    True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Number):
        number = float(value)
        return number if math.isfinite(number) else None

    text = _STRIP_PATTERN.sub("", str(value))
    if not text:
        return None

    if text.endswith("%"):
        text = text[:-1]
    if text.startswith("(") and text.endswith(")"):
        text = "-" + text[1:-1]

    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def extract_valid_numbers(frame: pd.DataFrame, column: str | int) -> list[float]:
    """
    Extract the numeric values of one column.

    Parameters
    ----------
    frame : pd.DataFrame
        Table as loaded by load_table.
    column : str | int
        Column name, or position if no column has that name.

    Returns
    -------
    list[float]
        Cleaned values in row order; blank or unparsable cells dropped.

    Raises
    ------
    KeyError
        If the column does not exist.
    """
    if column in frame.columns:
        raw = frame[column]
    elif isinstance(column, int) and 0 <= column < frame.shape[1]:
        raw = frame.iloc[:, column]
    else:
        raise KeyError(f"Column not found: {column!r}")

    cleaned = raw.map(clean_numeric_value)
    values = [float(v) for v in cleaned if v is not None and not pd.isna(v)]

    dropped = len(raw) - len(values)
    if dropped > 0:
        logger.warning(
            "Dropped %d non-numeric cell(s) from column %r (%d kept)",
            dropped,
            column,
            len(values),
        )
    return values
