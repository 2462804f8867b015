from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import dash
from dash import Input, Output, State, dcc, exceptions

from param_browser.core.selection import SelectionState
from param_browser.services.export_service import export_filename, figure_to_png, slice_to_csv
from param_browser.services.plot_service import build_plot
from param_browser.ui.ids import IDs

if TYPE_CHECKING:
    from param_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def csv_download(ctx: AppConfig, state_data: Optional[Dict[str, Any]]) -> Tuple[Optional[bytes], str, str]:
    """
    Pure helper: (content, filename, status). Content is None when the
    selection matches no rows; that is reported, not raised.
    """
    state = SelectionState.from_dict(state_data)
    if not ctx.plot_available(state.plot_key):
        return None, "", "No data available to download"

    result = build_plot(ctx.store, state)
    content = slice_to_csv(result.slice)
    if content is None:
        return None, "", "No data available to download"

    filename = export_filename(ctx.global_config.export_prefix, "data", "csv")
    return content, filename, f"Exported {result.slice.data_points} rows"


def png_download(ctx: AppConfig, state_data: Optional[Dict[str, Any]]) -> Tuple[Optional[bytes], str, str]:
    state = SelectionState.from_dict(state_data)
    if not ctx.plot_available(state.plot_key):
        return None, "", "No plot available to download"

    result = build_plot(ctx.store, state)
    content = figure_to_png(result.plot_config.to_figure())
    filename = export_filename(ctx.global_config.export_prefix, "plot", "png")
    return content, filename, "Plot exported"


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # CSV export of the current slice
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Output(IDs.Control.DOWNLOAD_STATUS, "children"),
        Input(IDs.Control.DOWNLOAD_CSV_BTN, "n_clicks"),
        State(IDs.Store.SELECTION, "data"),
        prevent_initial_call=True,
    )
    def download_current_data(n_clicks, state_data):
        if not n_clicks or not state_data:
            raise exceptions.PreventUpdate

        try:
            content, filename, status = csv_download(ctx, state_data)
        except Exception:
            logger.exception("Error downloading CSV", extra={"selection_state": state_data})
            return dash.no_update, "Error downloading CSV file"

        if content is None:
            return dash.no_update, status
        return dcc.send_bytes(content, filename, type="text/csv"), status

    # ---------------------------------------------------------
    # PNG export of the current plot
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_PNG, "data"),
        Output(IDs.Control.DOWNLOAD_STATUS, "children", allow_duplicate=True),
        Input(IDs.Control.DOWNLOAD_PNG_BTN, "n_clicks"),
        State(IDs.Store.SELECTION, "data"),
        prevent_initial_call=True,
    )
    def download_current_plot(n_clicks, state_data):
        if not n_clicks or not state_data:
            raise exceptions.PreventUpdate

        try:
            content, filename, status = png_download(ctx, state_data)
        except Exception:
            # kaleido missing or failing to start lands here
            logger.exception("Error downloading PNG", extra={"selection_state": state_data})
            return dash.no_update, "Error downloading PNG file"

        if content is None:
            return dash.no_update, status
        return dcc.send_bytes(content, filename, type="image/png"), status
