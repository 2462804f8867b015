from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from param_browser.config.loader import load_global_config
from param_browser.core.exceptions import DatasetLoadError
from param_browser.services.dataset_service import DatasetStore
from param_browser.ui.layout.build_layout import build_layout
from param_browser.ui.callbacks.callbacks_parameters import register_parameter_callbacks
from param_browser.ui.callbacks.callbacks_render import register_render_callbacks
from param_browser.ui.callbacks.callbacks_io import register_io_callbacks

logger = logging.getLogger(__name__)


def build_context(config_root: Path | str = Path("config")) -> AppConfig:
    """
    Load config and every plot's data, and resolve the active plot.

    Plots whose data fails to load are recorded in AppConfig.load_errors and
    shown in the UI; the remaining plots stay usable.
    """
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)
    if not global_config.plots:
        raise RuntimeError(f"No plots configured under: {config_root}")

    # 2) Load data for all plots before any slice is requested
    store = DatasetStore(global_config)
    load_errors: Dict[str, str] = {}
    try:
        store.load_all()
    except DatasetLoadError as e:
        load_errors = {key: str(err) for key, err in e.failures.items()}

    # 3) Choose Default Plot
    default_plot_key = store.default_plot_key()
    if default_plot_key is None:
        logger.warning("No enabled plots in configuration", extra={"config_root": str(config_root)})

    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        store=store,
        default_plot_key=default_plot_key,
        load_errors=load_errors,
    )
    ctx.validate()
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_context(config_root)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(Path(__file__).parent / "assets"),
    )

    app.title = ctx.global_config.app_name

    app.layout = build_layout(ctx)

    # Register callbacks
    register_parameter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={
            "config_root": str(ctx.config_root),
            "default_plot": ctx.default_plot_key,
            "loaded_plots": list(ctx.store),
            "failed_plots": list(ctx.load_errors),
        },
    )
    return app
