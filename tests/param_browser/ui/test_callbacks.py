import json
from pathlib import Path

import dash
import pytest
from dash import exceptions

from param_browser.config.loader import DATA_ROOT_ENV
from param_browser.ui.callbacks.callbacks_io import csv_download, png_download
from param_browser.ui.callbacks.callbacks_parameters import panel_for_plot, selection_from_sliders
from param_browser.ui.callbacks.callbacks_render import render_outputs
from param_browser.ui.dash_app import build_context, create_dash_app
from param_browser.ui.ids import slider_id

GRID = "p,q,x,y\n1,10,2,20\n1,10,1,10\n2,10,1,99\n1,20,1,7\n"


def _make_config_root(tmp_path: Path, with_broken_plot: bool = False) -> Path:
    (tmp_path / "grid.csv").write_text(GRID, encoding="utf-8")

    plots = {
        "main": {"x_column": "x", "y_column": "y", "title": "Y vs X"},
        "other": {"x_column": "q", "y_column": "y", "parameters": ["p"]},
    }
    if with_broken_plot:
        plots["broken"] = {"x_column": "x", "y_column": "y", "data_source": "missing.csv"}

    payload = {
        "app": {"name": "Test Browser"},
        "data": {
            "source": "grid.csv",
            "parameters": {
                "p": {"label": "Pressure", "unit": "bar", "precision": 1},
                "q": {},
            },
        },
        "plots": plots,
        "ui": {"default_plot": "main"},
        "export": {"filename_prefix": "test"},
    }
    (tmp_path / "global.json").write_text(json.dumps(payload), encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _no_data_root_env(monkeypatch):
    monkeypatch.delenv(DATA_ROOT_ENV, raising=False)


@pytest.fixture
def ctx(tmp_path):
    return build_context(_make_config_root(tmp_path))


def test_build_context(ctx):
    assert ctx.default_plot_key == "main"
    assert ctx.load_errors == {}
    assert ctx.plot_available("main")
    assert ctx.plot_available("other")
    assert not ctx.plot_available(None)


def test_build_context_records_failed_plots(tmp_path):
    ctx = build_context(_make_config_root(tmp_path, with_broken_plot=True))

    assert list(ctx.load_errors) == ["broken"]
    assert "file not found" in ctx.load_errors["broken"]
    assert ctx.plot_available("main")
    assert not ctx.plot_available("broken")


def test_create_dash_app(tmp_path):
    app = create_dash_app(_make_config_root(tmp_path))

    assert isinstance(app, dash.Dash)
    assert app.title == "Test Browser"


def test_panel_for_plot(ctx):
    sliders, selection = panel_for_plot(ctx, "other")

    assert len(sliders) == 1
    assert selection == {"plot_key": "other", "values": {"p": 1.0}}


def test_panel_for_unavailable_plot(tmp_path):
    ctx = build_context(_make_config_root(tmp_path, with_broken_plot=True))

    _, selection = panel_for_plot(ctx, "broken")

    assert selection == {"plot_key": "broken", "values": {}}


def test_panel_without_plot(ctx):
    _, selection = panel_for_plot(ctx, None)
    assert selection["plot_key"] is None


def test_selection_from_sliders(ctx):
    state = {"plot_key": "main", "values": {"p": 1.0, "q": 10.0}}
    ids = [slider_id("p"), slider_id("q")]

    selection, labels = selection_from_sliders(ctx, state, ids, [1, 0])

    assert selection == {"plot_key": "main", "values": {"p": 2.0, "q": 10.0}}
    assert labels == ["Current: 2.0bar", "Current: 10.000"]


def test_selection_from_sliders_out_of_range_keeps_previous(ctx):
    state = {"plot_key": "main", "values": {"p": 1.0}}

    selection, _ = selection_from_sliders(ctx, state, [slider_id("p")], [42])

    assert selection["values"] == {"p": 1.0}


def test_selection_from_sliders_unavailable_plot(ctx):
    with pytest.raises(exceptions.PreventUpdate):
        selection_from_sliders(ctx, {"plot_key": "nope"}, [slider_id("p")], [0])


def test_render_outputs(ctx):
    state = {"plot_key": "main", "values": {"p": 1.0, "q": 10.0}}

    fig, config, cards, items, count, csv_disabled = render_outputs(ctx, state)

    assert list(fig.data[0].x) == [1, 2]
    assert list(fig.data[0].y) == [10, 20]
    assert config["toImageButtonOptions"]["filename"] == "test_plot"
    assert len(cards) == 4
    assert len(items) == 2
    assert count == "2"
    assert csv_disabled is False


def test_render_outputs_empty_slice(ctx):
    state = {"plot_key": "main", "values": {"p": 5.0}}

    fig, _, _, _, count, csv_disabled = render_outputs(ctx, state)

    assert count == "0"
    assert csv_disabled is True
    assert len(fig.data[0].x) == 0


def test_render_outputs_no_plot(ctx):
    _, _, _, _, count, csv_disabled = render_outputs(ctx, {"plot_key": None, "values": {}})

    assert count == "0"
    assert csv_disabled is True


def test_csv_download(ctx):
    state = {"plot_key": "main", "values": {"p": 1.0, "q": 10.0}}

    content, filename, status = csv_download(ctx, state)

    assert content.decode("utf-8").split("\n") == ["p,q,x,y", "1,10,1,10", "1,10,2,20"]
    assert filename.startswith("test_data_")
    assert filename.endswith(".csv")
    assert status == "Exported 2 rows"


def test_csv_download_empty_slice(ctx):
    content, _, status = csv_download(ctx, {"plot_key": "main", "values": {"p": 5.0}})

    assert content is None
    assert status == "No data available to download"


def test_png_download(ctx, monkeypatch):
    monkeypatch.setattr(
        "param_browser.ui.callbacks.callbacks_io.figure_to_png",
        lambda figure: b"png-bytes",
    )

    content, filename, status = png_download(ctx, {"plot_key": "main", "values": {"p": 1.0}})

    assert content == b"png-bytes"
    assert filename.startswith("test_plot_")
    assert filename.endswith(".png")
    assert status == "Plot exported"
