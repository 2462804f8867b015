from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Iterable, Optional, Tuple

import numpy as np

from param_browser.core.dataset import Dataset


@dataclass(frozen=True)
class ParameterIndexEntry:
    """
    Distinct valid values one parameter column takes in one dataset.

    Invariants:
        * values is strictly increasing and duplicate-free
        * count == len(values)
        * min/max are values[0]/values[-1], or None when the column had no valid values
    """
    values: Tuple[float, ...] = ()

    @property
    def count(self) -> int:
        return len(self.values)

    @property
    def min(self) -> Optional[float]:
        return self.values[0] if self.values else None

    @property
    def max(self) -> Optional[float]:
        return self.values[-1] if self.values else None

    @property
    def is_empty(self) -> bool:
        return not self.values

    def position(self, value: float) -> Optional[int]:
        """Position of value in values (exact match), or None."""
        idx = int(np.searchsorted(self.values, value)) if self.values else 0
        if idx < len(self.values) and self.values[idx] == value:
            return idx
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values": list(self.values),
            "min": self.min,
            "max": self.max,
            "count": self.count,
        }


def is_valid_number(value: Any) -> bool:
    """
    True for finite real numbers. Strings, booleans, None and NaN/inf are rejected.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, Real):
        return False
    return math.isfinite(value)


def build_entry(values: Iterable[Any]) -> ParameterIndexEntry:
    valid = {float(v) for v in values if is_valid_number(v)}
    return ParameterIndexEntry(values=tuple(sorted(valid)))


def build_index(dataset: Dataset, parameter_names: Iterable[str]) -> Dict[str, ParameterIndexEntry]:
    """
    Compute the sorted distinct values of each parameter column in a dataset.

    A parameter that is missing from the dataset, or whose cells are all
    invalid, gets an empty entry rather than being dropped, so callers can
    report it as unselectable.

    :param dataset: the dataset to scan (not mutated)
    :param parameter_names: parameter columns relevant to the dataset's plot
    :return: mapping parameter name -> ParameterIndexEntry, in the given order
    """
    index: Dict[str, ParameterIndexEntry] = {}
    for name in parameter_names:
        if not dataset.has_column(name):
            index[name] = ParameterIndexEntry()
            continue
        index[name] = build_entry(dataset.column(name).tolist())
    return index
