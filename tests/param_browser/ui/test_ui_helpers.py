from param_browser.config.model import ParameterConfig
from param_browser.core.dataset import Dataset
from param_browser.core.parameter_index import ParameterIndexEntry
from param_browser.core.slice_engine import slice_dataset
from param_browser.ui.helpers import (
    current_value_text,
    info_card_values,
    parameter_heading,
    range_text,
    selection_list_items,
    slider_marks,
    value_at_position,
)

ENTRY = ParameterIndexEntry(values=(0.1, 0.25, 1.0))


def test_slider_marks():
    assert slider_marks(ENTRY, 2) == {0: "0.10", 2: "1.00"}
    assert slider_marks(ParameterIndexEntry()) == {}


def test_value_at_position():
    assert value_at_position(ENTRY, 1) == 0.25
    assert value_at_position(ENTRY, "2") == 1.0
    assert value_at_position(ENTRY, 3) is None
    assert value_at_position(ENTRY, -1) is None
    assert value_at_position(ENTRY, None) is None


def test_current_value_text():
    meta = ParameterConfig(name="a", unit="m", precision=1)
    assert current_value_text(0.25, meta) == "Current: 0.2m"
    assert current_value_text(None, meta) == "Current: n/a"


def test_parameter_heading():
    assert parameter_heading(ParameterConfig(name="a", label="Alpha", unit="m")) == "Alpha (m)"
    assert parameter_heading(ParameterConfig(name="a")) == "a"


def test_range_text():
    assert range_text(None) == "N/A"
    assert range_text((1.0, 20.0)) == "1-20"
    assert range_text((0.5, 2.0)) == "0.5-2"
    assert range_text((1.0, 2.0), precision=3) == "1.000-2.000"


def test_info_card_values():
    ds = Dataset.from_records(
        "plot",
        [
            {"p": 1.0, "x": 0.0, "y": 1.5},
            {"p": 1.0, "x": 10.0, "y": 2.5},
        ],
    )
    sl = slice_dataset(ds, "x", "y", {"p": 1.0})

    assert info_card_values(sl, 1) == [
        ("2", "Data Points"),
        ("1", "Parameters"),
        ("0-10", "x Range"),
        ("1.500-2.500", "y Range"),
    ]


def test_info_card_values_without_slice():
    values = info_card_values(None, 4)
    assert values[0] == ("0", "Data Points")
    assert values[1] == ("4", "Parameters")
    assert values[2][0] == "N/A"


def test_selection_list_items():
    items = selection_list_items(
        {"a": 0.5, "b": 2.0},
        {"a": ParameterConfig(name="a", label="Alpha", unit="m", precision=1)},
    )
    assert [item.children for item in items] == ["Alpha: 0.5m", "b: 2.000"]
