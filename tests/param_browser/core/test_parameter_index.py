import math

import numpy as np
import pandas as pd

from param_browser.core.dataset import Dataset
from param_browser.core.parameter_index import ParameterIndexEntry, build_index, is_valid_number


def _make_dataset():
    return Dataset.from_records(
        "plot",
        [
            {"p": 2.0, "q": 10.0, "y": 1.0},
            {"p": 1.0, "q": 20.0, "y": 2.0},
            {"p": 2.0, "q": 10.0, "y": 3.0},
            {"p": 0.5, "q": None, "y": 4.0},
        ],
    )


def test_build_index_sorted_unique_values():
    index = build_index(_make_dataset(), ["p", "q"])

    assert index["p"].values == (0.5, 1.0, 2.0)
    assert index["p"].count == 3
    assert index["p"].min == 0.5
    assert index["p"].max == 2.0

    # None/NaN dropped
    assert index["q"].values == (10.0, 20.0)


def test_build_index_discards_null_and_text():
    ds = Dataset("plot", pd.DataFrame({"p": pd.Series([5, None, 5, 3, "x"], dtype=object)}))

    entry = build_index(ds, ["p"])["p"]

    assert entry.values == (3, 5)
    assert entry.count == 2
    assert entry.min == 3
    assert entry.max == 5


def test_build_index_missing_parameter_is_empty():
    index = build_index(_make_dataset(), ["p", "not_a_column"])

    entry = index["not_a_column"]
    assert entry.is_empty
    assert entry.values == ()
    assert entry.count == 0
    assert entry.min is None
    assert entry.max is None


def test_build_index_keeps_requested_order():
    index = build_index(_make_dataset(), ["q", "p"])
    assert list(index.keys()) == ["q", "p"]


def test_build_index_values_strictly_increasing():
    rng = np.random.default_rng(0)
    frame = pd.DataFrame({"p": rng.choice([0.1, 0.2, 0.3, np.nan, 1e-9, -4.0], size=200)})
    entry = build_index(Dataset("plot", frame), ["p"])["p"]

    assert entry.count == len(entry.values)
    assert all(a < b for a, b in zip(entry.values, entry.values[1:]))
    assert all(math.isfinite(v) for v in entry.values)


def test_build_index_does_not_mutate_dataset():
    ds = _make_dataset()
    before = ds.rows.copy()
    build_index(ds, ["p", "q"])
    pd.testing.assert_frame_equal(ds.rows, before)


def test_is_valid_number():
    assert is_valid_number(1)
    assert is_valid_number(2.5)
    assert is_valid_number(np.float64(3.0))
    assert not is_valid_number(None)
    assert not is_valid_number(float("nan"))
    assert not is_valid_number(float("inf"))
    assert not is_valid_number("5")
    assert not is_valid_number(True)


def test_entry_position_is_exact():
    entry = ParameterIndexEntry(values=(0.1, 0.2, 0.3))
    assert entry.position(0.2) == 1
    assert entry.position(0.25) is None
    assert entry.position(0.1 + 0.2) is None  # 0.30000000000000004
    assert ParameterIndexEntry().position(1.0) is None


def test_entry_to_dict():
    entry = ParameterIndexEntry(values=(1.0, 2.0))
    assert entry.to_dict() == {"values": [1.0, 2.0], "min": 1.0, "max": 2.0, "count": 2}
