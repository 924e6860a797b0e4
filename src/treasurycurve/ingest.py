"""
CSV ingestion for Treasury yield files.

Expected CSV format (one header row, then one row per date):
    date, <tenor_1>, <tenor_2>, ..., <tenor_n>

Value columns are read positionally in the order of the tenor set, so the
header text itself is not interpreted. Missing observations may be left
blank or marked with any non-numeric token ("ND", ".").
"""

from pathlib import Path
from typing import List, Union
import logging

import pandas as pd

from .curves.store import CurveStore
from .tenors import LIVE_TENORS, TenorSet

LOGGER = logging.getLogger(__name__)


def read_curve_rows(filepath: Union[str, Path]) -> List[List[str]]:
    """
    Read a yield CSV into tokenized rows.

    Every field is kept as a string; blank fields come back as "". The
    header row is consumed and fixes the row width: longer rows (e.g. a
    trailing comma) are cut to that width, shorter rows keep their own
    field count so the store can reject them.

    Args:
        filepath: Path to CSV file

    Returns:
        List of rows, each [date, value_1, ..., value_n]

    Raises:
        FileNotFoundError: If the file does not exist
    """
    try:
        header = pd.read_csv(filepath, nrows=0, comment="#")
    except pd.errors.EmptyDataError:
        LOGGER.warning("Yield file %s is empty", filepath)
        return []

    width = len(header.columns)

    def truncate(fields: List[str]) -> List[str]:
        LOGGER.debug("Row with %d fields cut to %d", len(fields), width)
        return fields[:width]

    df = pd.read_csv(
        filepath,
        dtype=str,
        keep_default_na=False,
        comment="#",
        index_col=False,
        engine="python",
        on_bad_lines=truncate,
    )

    rows = []
    for values in df.itertuples(index=False, name=None):
        fields = list(values)
        # pandas pads short rows with NaN; blanks in the file stay ""
        while fields and pd.isna(fields[-1]):
            fields.pop()
        rows.append(fields)
    return rows


def load_curve_csv(
    store: CurveStore,
    filepath: Union[str, Path],
    date_filter: str = "",
    tenors: TenorSet = LIVE_TENORS,
) -> bool:
    """
    Populate a store from a yield CSV.

    Args:
        store: Store to (re)load
        filepath: Path to CSV file
        date_filter: Optional substring of the wanted date (e.g. "2024-02")
        tenors: Tenor set describing the value columns

    Returns:
        True if a curve was loaded; the store is left empty otherwise
    """
    rows = read_curve_rows(filepath)
    LOGGER.debug("Read %d rows from %s", len(rows), filepath)

    if not store.load(rows, date_filter=date_filter, tenors=tenors):
        if date_filter:
            LOGGER.warning("No curve matching '%s' in %s", date_filter, filepath)
        else:
            LOGGER.warning("No usable curve in %s", filepath)
        return False

    LOGGER.info(
        "Loaded %s curve for %s: %d points",
        tenors.name, store.date(), len(store),
    )
    return True


__all__ = [
    "read_curve_rows",
    "load_curve_csv",
]
