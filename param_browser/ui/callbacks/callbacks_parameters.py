from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

import dash
from dash import ALL, Input, Output, State, exceptions, html

from param_browser.config.model import ParameterConfig
from param_browser.core.selection import SelectionState
from param_browser.services.plot_service import initial_selection
from param_browser.ui.helpers import current_value_text, value_at_position
from param_browser.ui.ids import IDs
from param_browser.ui.layout.build_parameter_panel import build_parameter_sliders

if TYPE_CHECKING:
    from param_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def panel_for_plot(ctx: AppConfig, plot_key: Optional[str]) -> Tuple[List[Any], Dict[str, Any]]:
    """
    Pure helper: slider blocks and a fresh selection for a newly active plot.
    Switching plots always resets the selection to that plot's defaults.
    """
    if not plot_key:
        return (
            [html.Div("No plots are enabled in the configuration.", className="text-muted")],
            SelectionState(plot_key=None).to_dict(),
        )

    if not ctx.plot_available(plot_key):
        message = ctx.load_errors.get(plot_key) or "data not loaded"
        return (
            [html.Div(f"Data for '{plot_key}' is not available: {message}", className="text-muted")],
            SelectionState(plot_key=plot_key).to_dict(),
        )

    defaults = initial_selection(ctx.store, plot_key)
    logger.info(
        "Plot tab activated",
        extra={
            "plot_key": plot_key,
            "selection": defaults.values,
            "unavailable_parameters": defaults.unavailable,
        },
    )

    sliders = build_parameter_sliders(
        ctx.global_config.parameter_configs(plot_key),
        ctx.store.get_index(plot_key),
        defaults.values,
    )
    return sliders, SelectionState(plot_key=plot_key, values=defaults.values).to_dict()


def selection_from_sliders(
    ctx: AppConfig,
    state_data: Optional[Dict[str, Any]],
    slider_ids: Sequence[Dict[str, str]],
    positions: Sequence[Any],
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Pure helper: map slider positions back to indexed values.

    Returns the new selection dict (for the store) and the "Current: ..." text
    for each slider, in slider order. Positions outside the index keep the
    previous value for that parameter.
    """
    state = SelectionState.from_dict(state_data)
    if not ctx.plot_available(state.plot_key):
        raise exceptions.PreventUpdate

    index = ctx.store.get_index(state.plot_key)
    parameters = ctx.global_config.parameter_configs(state.plot_key)

    values: Dict[str, float] = {}
    labels: List[str] = []
    for sid, pos in zip(slider_ids, positions):
        name = sid["index"]
        entry = index.get(name)
        value = value_at_position(entry, pos) if entry is not None else None
        if value is None:
            value = state.values.get(name)
        if value is not None:
            values[name] = value
        labels.append(current_value_text(value, parameters.get(name) or ParameterConfig(name=name)))

    return SelectionState(plot_key=state.plot_key, values=values).to_dict(), labels


def register_parameter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Plot tab -> sliders + fresh selection
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PARAMETER_PANEL, "children"),
        Output(IDs.Store.SELECTION, "data"),
        Input(IDs.Control.PLOT_TABS, "value"),
        prevent_initial_call=True,
    )
    def update_parameters_for_plot(plot_key: Optional[str]):
        logger.info("Switching to plot tab", extra={"plot_key": plot_key})
        return panel_for_plot(ctx, plot_key)

    # ---------------------------------------------------------
    # Slider moved -> selection
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTION, "data", allow_duplicate=True),
        Output({"type": IDs.Pattern.CURRENT_VALUE, "index": ALL}, "children"),
        Input({"type": IDs.Pattern.SLIDER, "index": ALL}, "value"),
        State({"type": IDs.Pattern.SLIDER, "index": ALL}, "id"),
        State(IDs.Store.SELECTION, "data"),
        prevent_initial_call=True,
    )
    def update_selection_from_sliders(positions, slider_ids, state_data):
        if not slider_ids:
            raise exceptions.PreventUpdate
        return selection_from_sliders(ctx, state_data, slider_ids, positions)
