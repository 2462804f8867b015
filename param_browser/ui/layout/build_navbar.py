from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from param_browser.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    title = global_config.app_name
    subtitle = global_config.app_description or "Interactive parametric data explorer"

    version = []
    if global_config.app_version:
        version = [
            html.Div(
                f"v{global_config.app_version}",
                className="ms-auto text-muted pb-navbar-version",
            )
        ]

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(
                            subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                *version,
            ],
        ),
        dark=False,
        className="shadow-sm pb-navbar",
    )
