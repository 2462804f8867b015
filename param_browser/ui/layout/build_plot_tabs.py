from __future__ import annotations

from typing import Optional

from dash import dcc, html

from param_browser.config.model import GlobalConfig
from param_browser.ui.ids import IDs


def build_plot_tabs(global_config: GlobalConfig, active_plot_key: Optional[str]) -> html.Div:
    """
    One tab per enabled plot, in configuration order.
    The tab bar is hidden when there is only one enabled plot (or none),
    but stays in the layout so callbacks keyed on it still fire.
    """
    enabled = [(key, spec) for key, spec in global_config.plots.items() if spec.enabled]

    tabs = dcc.Tabs(
        id=IDs.Control.PLOT_TABS,
        value=active_plot_key,
        children=[
            dcc.Tab(
                label=spec.title,
                value=key,
                id=f"plot-tab-{key}",
            )
            for key, spec in enabled
        ],
        className="mb-2",
    )

    return html.Div(
        tabs,
        id=IDs.Control.PLOT_TABS_CONTAINER,
        style={} if len(enabled) > 1 else {"display": "none"},
    )
