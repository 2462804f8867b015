from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from param_browser.core.dataset import Dataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Slice:
    """
    Filtered, free-axis-sorted view of a dataset for one selection.

    Fields:

    - x: free-axis values of the matching rows, in sorted order
    - y: y-column values parallel to x; None where the cell is missing
    - rows: the matching rows, sorted, with a fresh 0..n-1 index
    - x_column / y_column: the resolved column names
    """
    x: Tuple[Any, ...]
    y: Tuple[Any, ...]
    rows: pd.DataFrame = field(repr=False)
    x_column: str
    y_column: str

    @property
    def data_points(self) -> int:
        return len(self.x)

    @property
    def is_empty(self) -> bool:
        return self.data_points == 0

    def x_range(self) -> Optional[Tuple[float, float]]:
        return _finite_range(self.x)

    def y_range(self) -> Optional[Tuple[float, float]]:
        return _finite_range(self.y)


def _finite_range(values: Tuple[Any, ...]) -> Optional[Tuple[float, float]]:
    numeric = pd.to_numeric(pd.Series(values, dtype=object), errors="coerce").to_numpy(dtype=float)
    numeric = numeric[np.isfinite(numeric)]
    if numeric.size == 0:
        return None
    return float(numeric.min()), float(numeric.max())


def _cell(value: Any) -> Any:
    """Convert a DataFrame cell to a plain Python value, mapping missing to None."""
    if value is None:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    if isinstance(value, np.generic):
        value = value.item()
        if isinstance(value, float) and np.isnan(value):
            return None
    return value


def _match_mask(column: pd.Series, value: Any) -> np.ndarray:
    # Exact equality only. NaN never equals anything, so missing cells drop out.
    if pd.api.types.is_numeric_dtype(column.dtype):
        return (column == value).to_numpy(dtype=bool)
    return np.fromiter(
        (_cell(v) is not None and not isinstance(v, str) and v == value for v in column),
        dtype=bool,
        count=len(column),
    )


def slice_dataset(
    dataset: Dataset,
    free_axis_column: str,
    y_column: str,
    selection: Mapping[str, Any],
) -> Slice:
    """
    Keep the rows matching every selected parameter except the free axis,
    sorted ascending by the free axis.

    - A selection entry for the free axis itself is ignored
    - Matching is exact equality; a column missing from the dataset never matches
    - The sort is stable: rows sharing a free-axis value keep their original order
    - Rows whose free-axis cell is missing or non-numeric sort last
    - y keeps missing cells as None; nothing is interpolated or dropped

    :param dataset: the dataset to slice (not mutated)
    :param free_axis_column: the column allowed to vary (plot x column)
    :param y_column: the dependent column (plot y column)
    :param selection: parameter name -> selected value
    :return: a new Slice
    """
    frame = dataset.rows
    mask = np.ones(len(frame), dtype=bool)

    for param, value in selection.items():
        if param == free_axis_column:
            continue
        if param not in frame.columns:
            # Unknown column: nothing can match
            mask[:] = False
            break
        mask &= _match_mask(frame[param], value)

    matched = frame.loc[mask]

    if matched.empty:
        logger.debug(
            "Empty slice",
            extra={"plot_key": dataset.plot_key, "free_axis": free_axis_column, "selection": dict(selection)},
        )
        return Slice(
            x=(),
            y=(),
            rows=matched.reset_index(drop=True),
            x_column=free_axis_column,
            y_column=y_column,
        )

    if free_axis_column in matched.columns:
        sort_key = pd.to_numeric(matched[free_axis_column], errors="coerce")
        # mergesort is the stable option; NaN keys go last
        order = sort_key.sort_values(kind="mergesort", na_position="last").index
        ordered = matched.loc[order].reset_index(drop=True)
        x = tuple(_cell(v) for v in ordered[free_axis_column])
    else:
        ordered = matched.reset_index(drop=True)
        x = (None,) * len(ordered)

    if y_column in ordered.columns:
        y = tuple(_cell(v) for v in ordered[y_column])
    else:
        y = (None,) * len(ordered)

    return Slice(x=x, y=y, rows=ordered, x_column=free_axis_column, y_column=y_column)
