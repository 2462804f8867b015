from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Any, Union

import numpy as np
import pandas as pd

from param_browser.config.model import GlobalConfig
from param_browser.core.dataset import Dataset
from param_browser.core.exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)


_INTEGER = re.compile(r"[+-]?\d+")


def _parse_cell(text: str) -> Any:
    """Number if the text parses as one (int or correctly rounded float), else the text; None if empty."""
    if text == "":
        return None
    # float() also accepts "1_000"; a CSV cell like that is text
    if "_" in text:
        return text
    try:
        if _INTEGER.fullmatch(text):
            return int(text)
        return float(text)
    except ValueError:
        return text


def _type_column(raw: pd.Series) -> pd.Series:
    """
    Per-cell typing: numbers where the text parses as a number, the text itself
    otherwise, missing for empty cells.

    A column whose non-empty cells are all numeric becomes a numeric dtype.
    Cells go through int()/float() so every value is the nearest double to its
    text and distinct grid values stay distinct.
    """
    text = raw.fillna("").astype(str).str.strip()
    cells = [_parse_cell(t) for t in text]

    if any(isinstance(c, str) for c in cells):
        # Mixed column: numbers, unparseable text as str, missing as None
        return pd.Series(cells, index=raw.index, dtype=object)

    if all(c is None for c in cells):
        return pd.Series(np.nan, index=raw.index, dtype=float)

    return pd.Series([np.nan if c is None else c for c in cells], index=raw.index)


def read_table(source: Union[str, Path, IO[str]], plot_key: str) -> pd.DataFrame:
    """
    Parse one CSV source into a typed DataFrame.

    Header row defines columns, blank lines are skipped, ragged short rows are
    padded with missing cells.

    :raises SourceUnavailableError: if the source cannot be read or parsed
    """
    try:
        raw = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            # fields past the header are dropped instead of shifting columns
            index_col=False,
        )
    except FileNotFoundError as e:
        raise SourceUnavailableError(plot_key, source, "file not found") from e
    except pd.errors.EmptyDataError as e:
        raise SourceUnavailableError(plot_key, source, "no header row") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise SourceUnavailableError(plot_key, source, str(e)) from e

    raw.columns = [str(c).strip() for c in raw.columns]
    return pd.DataFrame({col: _type_column(raw[col]) for col in raw.columns}, index=raw.index)


def load_plot_dataset(config: GlobalConfig, plot_key: str) -> Dataset:
    """
    Materialise the Dataset for one configured plot from its CSV source.

    :raises SchemaMissingError: if the plot key is not configured
    :raises SourceUnavailableError: if its source cannot be read
    """
    path = config.source_for(plot_key)

    if not path.is_file():
        logger.error(
            "Data source missing",
            extra={"plot_key": plot_key, "path": str(path)},
        )
        raise SourceUnavailableError(plot_key, path, "file not found")

    logger.info("Loading data", extra={"plot_key": plot_key, "path": str(path)})
    frame = read_table(path, plot_key)

    logger.info(
        "Parsed CSV data",
        extra={"plot_key": plot_key, "n_rows": len(frame), "columns": list(frame.columns)},
    )
    return Dataset(plot_key=plot_key, rows=frame, source_path=path)
