from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from param_browser.core.parameter_index import ParameterIndexEntry
from param_browser.core.selection import DefaultSelection, SelectionState, default_selection
from param_browser.core.slice_engine import Slice, slice_dataset
from param_browser.services.dataset_service import DatasetStore
from param_browser.views.plot_config import PlotConfig, assemble_plot_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotResult:
    slice: Slice
    plot_config: PlotConfig


def initial_selection(store: DatasetStore, plot_key: str) -> DefaultSelection:
    """
    Starting selection for a plot tab: the configured default value for each
    parameter when it is present in the index, else the smallest value.
    """
    index: Dict[str, ParameterIndexEntry] = store.get_index(plot_key)
    return default_selection(
        index,
        store.parameter_names(plot_key),
        preferred=store.config.default_selection,
    )


def build_plot(store: DatasetStore, state: SelectionState, filename: Optional[str] = None) -> PlotResult:
    """
    Selection -> Slice -> PlotConfig for the plot named in the state.

    Everything the computation needs is read from the store and config passed
    in; nothing is retained between calls.

    :raises SchemaMissingError: if state.plot_key is not configured
    :raises KeyError: if the plot is configured but not loaded
    """
    if state.plot_key is None:
        raise ValueError("SelectionState has no plot_key")

    config = store.config
    spec = config.plot(state.plot_key)
    dataset = store.get_dataset(state.plot_key)

    result = slice_dataset(dataset, spec.x_column, spec.y_column, state.values)

    logger.info(
        "Plot data computed",
        extra={
            "plot_key": state.plot_key,
            "data_points": result.data_points,
            "selection": dict(state.values),
        },
    )

    plot_config = assemble_plot_config(
        result,
        state.values,
        spec,
        config.parameter_configs(state.plot_key),
        filename=filename,
    )
    return PlotResult(slice=result, plot_config=plot_config)
