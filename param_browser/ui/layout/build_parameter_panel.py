from __future__ import annotations

from typing import List, Mapping, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from param_browser.config.model import ParameterConfig
from param_browser.core.parameter_index import ParameterIndexEntry
from param_browser.ui.helpers import current_value_text, parameter_heading, slider_marks
from param_browser.ui.ids import IDs, current_value_id, slider_id


def _slider_block(
    meta: ParameterConfig,
    entry: ParameterIndexEntry,
    selected: Optional[float],
) -> html.Div:
    if entry.is_empty:
        return html.Div(
            [
                html.Label(parameter_heading(meta), className="form-label"),
                html.Div("No values available", className="text-muted small mb-3"),
            ],
            className="pb-slider-container pb-slider-empty",
        )

    position = entry.position(selected) if selected is not None else None

    children = [
        html.Label(parameter_heading(meta), className="form-label"),
        dcc.Slider(
            id=slider_id(meta.name),
            min=0,
            max=max(entry.count - 1, 0),
            step=1,
            value=position if position is not None else 0,
            marks=slider_marks(entry, meta.precision),
            included=False,
        ),
        html.Div(
            [
                html.Span(
                    current_value_text(selected, meta),
                    id=current_value_id(meta.name),
                    className="pb-current-value",
                ),
                html.Span(
                    f"{entry.count} values available",
                    className="pb-value-count text-muted ms-auto",
                ),
            ],
            className="d-flex small",
        ),
    ]

    if meta.description:
        children.append(html.P(meta.description, className="pb-parameter-description text-muted small"))

    return html.Div(children, className="pb-slider-container mb-3")


def build_parameter_sliders(
    parameters: Mapping[str, ParameterConfig],
    index: Mapping[str, ParameterIndexEntry],
    selection: Mapping[str, float],
) -> List[html.Div]:
    """Slider blocks for one plot, in parameter order."""
    blocks: List[html.Div] = []
    for name, meta in parameters.items():
        entry = index.get(name) or ParameterIndexEntry()
        blocks.append(_slider_block(meta, entry, selection.get(name)))
    return blocks


def build_parameter_panel(children: List[html.Div]) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Parameters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div(children, id=IDs.Control.PARAMETER_PANEL),
                    html.Hr(),
                    html.H6("Current Selection"),
                    html.Div(
                        [
                            html.Span("Data Points: ", className="fw-semibold"),
                            html.Span("0", id=IDs.Control.DATA_POINTS_COUNT),
                        ],
                        className="small mb-2",
                    ),
                    html.Ul(id=IDs.Control.SELECTION_SUMMARY, className="small mb-0"),
                ]
            ),
        ],
        className="pb-sidebar",
    )
