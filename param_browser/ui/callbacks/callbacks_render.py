from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import dash
import plotly.graph_objs as go
from dash import Input, Output

from param_browser.core.exceptions import SchemaMissingError
from param_browser.core.selection import SelectionState
from param_browser.services.plot_service import build_plot
from param_browser.ui.helpers import build_info_cards, info_card_values, selection_list_items
from param_browser.ui.ids import IDs

if TYPE_CHECKING:
    from param_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this plot.", details)


RenderOutputs = Tuple[Any, Dict[str, Any], List[Any], List[Any], str, bool]


def render_outputs(ctx: AppConfig, state_data: Optional[Dict[str, Any]]) -> RenderOutputs:
    """
    Pure helper for the main render callback.

    :return: (figure, graph config, info cards, selection list, data point count,
              csv button disabled)
    """
    state = SelectionState.from_dict(state_data)
    n_parameters = len(state.values)
    no_data = (
        build_info_cards(info_card_values(None, n_parameters)),
        selection_list_items(state.values, {}),
        "0",
        True,
    )

    if state.plot_key is None:
        fig = _message_figure(
            "No plot selected.",
            "No plots are enabled in the configuration.",
        )
        return (fig, {"displaylogo": False}, *no_data)

    if not ctx.plot_available(state.plot_key):
        reason = ctx.load_errors.get(state.plot_key, "The data for this plot is not loaded.")
        return (_error_figure(reason), {"displaylogo": False}, *no_data)

    try:
        result = build_plot(ctx.store, state, filename=f"{ctx.global_config.export_prefix}_plot")
    except SchemaMissingError as e:
        return (_error_figure(str(e)), {"displaylogo": False}, *no_data)

    parameters = ctx.global_config.parameter_configs(state.plot_key)
    plot_config = result.plot_config

    return (
        plot_config.to_figure(),
        plot_config.config,
        build_info_cards(info_card_values(result.slice, n_parameters)),
        selection_list_items(state.values, parameters),
        str(result.slice.data_points),
        result.slice.is_empty,
    )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Main figure: SelectionState -> figure + info
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Control.MAIN_GRAPH, "config"),
        Output(IDs.Control.INFO_CARDS, "children"),
        Output(IDs.Control.SELECTION_SUMMARY, "children"),
        Output(IDs.Control.DATA_POINTS_COUNT, "children"),
        Output(IDs.Control.DOWNLOAD_CSV_BTN, "disabled"),
        Input(IDs.Store.SELECTION, "data"),
    )
    def update_main_graph_from_state(state_data: dict[str, Any] | None):
        try:
            return render_outputs(ctx, state_data)
        except Exception:
            logger.exception(
                "Error in update_main_graph_from_state",
                extra={"selection_state": state_data},
            )
            fig = _error_figure(
                "The app hit an unexpected error. "
                "If this keeps happening, grab the logs and open an issue."
            )
            return fig, {"displaylogo": False}, [], [], "0", True
