from param_browser.core.parameter_index import ParameterIndexEntry
from param_browser.core.selection import SelectionState, default_selection


def test_selection_state_round_trip():
    state = SelectionState(plot_key="plot", values={"a": 0.1, "b": 2.0})

    restored = SelectionState.from_dict(state.to_dict())

    assert restored == state
    assert list(restored.values) == ["a", "b"]


def test_selection_state_from_empty():
    state = SelectionState.from_dict(None)
    assert state.plot_key is None
    assert state.values == {}


def test_with_value_returns_copy():
    state = SelectionState(plot_key="plot", values={"a": 1.0})

    updated = state.with_value("a", 2.0)

    assert updated.values == {"a": 2.0}
    assert state.values == {"a": 1.0}


def test_default_selection_uses_smallest_value():
    index = {
        "a": ParameterIndexEntry(values=(0.1, 0.2)),
        "b": ParameterIndexEntry(values=(5.0, 10.0)),
    }

    defaults = default_selection(index, ["a", "b"])

    assert defaults.values == {"a": 0.1, "b": 5.0}
    assert defaults.unavailable == []


def test_default_selection_prefers_configured_value_when_indexed():
    index = {
        "a": ParameterIndexEntry(values=(0.1, 0.2)),
        "b": ParameterIndexEntry(values=(5.0, 10.0)),
    }

    defaults = default_selection(index, ["a", "b"], preferred={"a": 0.2, "b": 7.0})

    assert defaults.values == {"a": 0.2, "b": 5.0}


def test_default_selection_reports_empty_parameters():
    index = {
        "a": ParameterIndexEntry(values=(1.0,)),
        "b": ParameterIndexEntry(),
    }

    defaults = default_selection(index, ["a", "b", "c"])

    assert defaults.values == {"a": 1.0}
    assert defaults.unavailable == ["b", "c"]
