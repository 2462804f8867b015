"""
Core domain layer: dataset abstraction, parameter index, slice engine
and selection state
"""

from .dataset import Dataset
from .parameter_index import ParameterIndexEntry, build_index
from .selection import SelectionState, default_selection
from .slice_engine import Slice, slice_dataset

__all__ = [
    "Dataset",
    "ParameterIndexEntry",
    "build_index",
    "SelectionState",
    "default_selection",
    "Slice",
    "slice_dataset",
]
