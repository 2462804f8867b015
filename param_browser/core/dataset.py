from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

import pandas as pd

RowsLike = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


class Dataset:
    """
    Immutable table of rows for one plot.

    Includes:
    - The plot key the rows were loaded for
    - The rows as a DataFrame, one column per CSV header, cells numeric/str/NaN
    - The path the rows came from, if any

    Rows may be ragged: a column missing from a row is stored as NaN. The frame
    is copied on construction and must be treated as read-only by callers;
    slicing always returns new frames.
    """

    def __init__(
        self,
        plot_key: str,
        rows: RowsLike,
        source_path: Optional[Path] = None,
    ) -> None:
        self.plot_key = plot_key
        self.source_path = source_path

        if isinstance(rows, pd.DataFrame):
            frame = rows.copy()
        else:
            frame = pd.DataFrame.from_records(list(rows))

        # Positional index so stable ordering is the row order
        self._frame = frame.reset_index(drop=True)

    @classmethod
    def from_records(cls, plot_key: str, records: Iterable[Mapping[str, Any]]) -> Dataset:
        return cls(plot_key, list(records))

    # -------------------------------------------------------------------------
    # Properties & getters
    # -------------------------------------------------------------------------
    @property
    def rows(self) -> pd.DataFrame:
        """Return the rows (read-only by convention)."""
        return self._frame

    @property
    def columns(self) -> List[str]:
        return [str(c) for c in self._frame.columns]

    @property
    def n_rows(self) -> int:
        return len(self._frame)

    def has_column(self, name: str) -> bool:
        return name in self._frame.columns

    def column(self, name: str) -> pd.Series:
        """
        Return one column; a column absent from every row comes back all-missing
        so callers don't need a separate code path.
        """
        if name in self._frame.columns:
            return self._frame[name]
        return pd.Series([None] * len(self._frame), index=self._frame.index, dtype=object)

    def __len__(self) -> int:
        return len(self._frame)

    def __repr__(self) -> str:
        return f"Dataset(plot_key={self.plot_key!r}, n_rows={self.n_rows}, columns={self.columns!r})"
