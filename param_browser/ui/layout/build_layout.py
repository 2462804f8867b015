from __future__ import annotations

from typing import TYPE_CHECKING, List

import dash_bootstrap_components as dbc
from dash import dcc, html

from param_browser.core.selection import SelectionState
from param_browser.services.plot_service import initial_selection
from param_browser.ui.layout.build_download_panel import build_download_panel
from param_browser.ui.layout.build_navbar import build_navbar
from param_browser.ui.layout.build_parameter_panel import build_parameter_panel, build_parameter_sliders
from param_browser.ui.layout.build_plot_panel import build_plot_panel
from param_browser.ui.layout.build_plot_tabs import build_plot_tabs
from param_browser.ui.ids import IDs

if TYPE_CHECKING:
    from param_browser.ui.config import AppConfig


def _load_alert(ctx: AppConfig) -> html.Div:
    if not ctx.load_errors:
        return html.Div(id=IDs.Control.LOAD_ALERT)

    return html.Div(
        dbc.Alert(
            [
                html.Strong("Some plots could not be loaded."),
                html.Ul([html.Li(f"{key}: {msg}") for key, msg in ctx.load_errors.items()]),
            ],
            color="warning",
            dismissable=True,
        ),
        id=IDs.Control.LOAD_ALERT,
    )


def build_layout(ctx: AppConfig):
    plot_key = ctx.default_plot_key
    navbar = build_navbar(ctx.global_config)

    sliders: List[html.Div]
    if plot_key is None:
        sliders = [html.Div("No plots are enabled in the configuration.", className="text-muted")]
        selection = SelectionState(plot_key=None)
    elif not ctx.plot_available(plot_key):
        sliders = [html.Div(f"Data for '{plot_key}' is not available.", className="text-muted")]
        selection = SelectionState(plot_key=plot_key)
    else:
        defaults = initial_selection(ctx.store, plot_key)
        sliders = build_parameter_sliders(
            ctx.global_config.parameter_configs(plot_key),
            ctx.store.get_index(plot_key),
            defaults.values,
        )
        selection = SelectionState(plot_key=plot_key, values=defaults.values)

    return dbc.Container(
        fluid=True,
        className="pb-root",
        children=[
            navbar,

            # App-level stores
            dcc.Store(id=IDs.Store.SELECTION, storage_type="memory", data=selection.to_dict()),

            _load_alert(ctx),

            dbc.Row(
                [
                    dbc.Col(
                        [
                            build_parameter_panel(sliders),
                            build_download_panel(),
                        ],
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        [
                            build_plot_tabs(ctx.global_config, plot_key),
                            build_plot_panel(),
                        ],
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
