import pytest

from param_browser.config.model import GlobalConfig, ParameterConfig, PlotSpec
from param_browser.core.selection import SelectionState
from param_browser.services.dataset_service import DatasetStore
from param_browser.services.plot_service import build_plot, initial_selection


def _make_store(default_selection=None):
    config = GlobalConfig(
        app_name="Test",
        parameters={
            "p": ParameterConfig(name="p", label="Pressure", unit="Pa", precision=1),
            "q": ParameterConfig(name="q"),
        },
        plots={"plot": PlotSpec.from_raw("plot", {"x_column": "q", "y_column": "y", "title": "Y vs Q"})},
        default_selection=default_selection or {},
    )
    store = DatasetStore(config)
    store.register(
        "plot",
        [
            {"p": 1, "q": 10, "y": 100},
            {"p": 1, "q": 20, "y": 110},
            {"p": 2, "q": 10, "y": 200},
        ],
    )
    return store


def test_initial_selection_smallest_values():
    defaults = initial_selection(_make_store(), "plot")
    assert defaults.values == {"p": 1.0, "q": 10.0}


def test_initial_selection_configured_default():
    defaults = initial_selection(_make_store(default_selection={"p": 2}), "plot")
    assert defaults.values["p"] == 2.0


def test_build_plot():
    state = SelectionState(plot_key="plot", values={"p": 1.0, "q": 10.0})

    result = build_plot(_make_store(), state)

    assert result.slice.x == (10, 20)
    assert result.slice.y == (100, 110)
    assert result.plot_config.data_points == 2
    assert result.plot_config.summary == "Pressure: 1.0Pa, q: 10.000"
    assert result.plot_config.data[0]["x"] == [10, 20]


def test_build_plot_empty_selection_result():
    state = SelectionState(plot_key="plot", values={"p": 3.0})

    result = build_plot(_make_store(), state)

    assert result.slice.is_empty
    assert result.plot_config.data[0]["x"] == []


def test_build_plot_requires_plot_key():
    with pytest.raises(ValueError):
        build_plot(_make_store(), SelectionState(plot_key=None))


def test_build_plot_unknown_plot():
    with pytest.raises(KeyError):
        build_plot(_make_store(), SelectionState(plot_key="nope"))
