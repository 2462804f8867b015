from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from param_browser.ui.ids import IDs


def build_download_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Download", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.H6("Data Export"),
                    dbc.Button(
                        "Download CSV",
                        id=IDs.Control.DOWNLOAD_CSV_BTN,
                        color="secondary",
                        size="sm",
                        className="mb-1",
                        disabled=True,
                    ),
                    html.P(
                        "Export the filtered data as a CSV file",
                        className="text-muted small",
                    ),
                    dcc.Download(id=IDs.Control.DOWNLOAD_CSV),

                    html.H6("Plot Export"),
                    dbc.Button(
                        "Download PNG",
                        id=IDs.Control.DOWNLOAD_PNG_BTN,
                        color="secondary",
                        size="sm",
                        className="mb-1",
                    ),
                    html.P(
                        "Export the current plot as a high-resolution PNG",
                        className="text-muted small",
                    ),
                    dcc.Download(id=IDs.Control.DOWNLOAD_PNG),

                    html.Div(id=IDs.Control.DOWNLOAD_STATUS, className="small text-muted"),
                ]
            ),
        ],
        className="pb-download-card mt-3",
    )
