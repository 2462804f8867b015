from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from param_browser.ui.ids import IDs
from param_browser.views.plot_config import IMAGE_EXPORT_OPTIONS

GRAPH_HEIGHT = f"{IMAGE_EXPORT_OPTIONS['height']}px"


def build_plot_panel() -> dbc.Card:
    """Graph card with the info-card row underneath; both filled by the render callback."""
    graph = dcc.Graph(
        id=IDs.Control.MAIN_GRAPH,
        style={"height": GRAPH_HEIGHT},
        config={
            "responsive": True,
            "displaylogo": False,
            "toImageButtonOptions": {**IMAGE_EXPORT_OPTIONS, "filename": "plot"},
        },
    )

    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Plot"), className="p-2"),
            dbc.CardBody(
                [
                    dcc.Loading(graph, type="circle"),
                    dbc.Row(id=IDs.Control.INFO_CARDS, className="g-2 mt-2"),
                ],
                className="pb-main-body",
            ),
        ],
        className="pb-maincard",
    )
