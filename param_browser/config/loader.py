from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from param_browser.config.model import GlobalConfig, ParameterConfig, PlotSpec
from param_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DATA_ROOT_ENV = "PARAM_BROWSER_DATA_ROOT"


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a JSON object at top level of {path}")
    return raw


def _resolve_data_root(root: Path, raw_global: Dict[str, Any]) -> Optional[Path]:
    # Env var wins, then data_root from global.json, then the config root itself.
    # - Absolute paths are used as-is.
    # - Relative paths are resolved relative to the config root directory.
    env_root = os.environ.get(DATA_ROOT_ENV)
    if env_root:
        return Path(env_root)

    data_root_raw = raw_global.get("data_root")
    if data_root_raw is None:
        return root.resolve()

    data_root_path = Path(data_root_raw)
    if data_root_path.is_absolute():
        return data_root_path
    return (root / data_root_path).resolve()


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            plots/
                extra_plot_1.json
                extra_plot_2.json
                ...

    'global.json' carries the app metadata, the global parameter list under
    data.parameters, the shared data.source, inline plots and ui defaults.
    Each file in 'plots/' holds one more plot and must name it with a "key".

    Plot order is the declaration order in global.json followed by the files
    in plots/ sorted by filename. That order drives the default-plot fallback.

    :param root: Directory containing 'global.json' and optionally 'plots/'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if any file is malformed or plot keys collide.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    raw_global = _read_json(global_path)

    raw_app = raw_global.get("app") or {}
    raw_data = raw_global.get("data") or {}
    raw_ui = raw_global.get("ui") or {}
    raw_export = raw_global.get("export") or {}

    parameters = {
        name: ParameterConfig.from_raw(name, meta)
        for name, meta in (raw_data.get("parameters") or {}).items()
    }

    plots: Dict[str, PlotSpec] = {}
    for key, raw_plot in (raw_global.get("plots") or {}).items():
        plots[key] = PlotSpec.from_raw(key, raw_plot)

    plots_dir = root / "plots"
    if plots_dir.is_dir():
        logger.info(f"Scanning for plot configurations in: {plots_dir}")
        for config_file in sorted(plots_dir.glob("*.json")):
            raw_plot = _read_json(config_file)
            key = raw_plot.get("key") or config_file.stem
            if key in plots:
                raise ConfigError(f"Duplicate plot key '{key}' in {config_file}")
            plots[key] = PlotSpec.from_raw(key, raw_plot)

    # Legacy layouts put the default plot under ui.components.plots
    default_plot = raw_ui.get("default_plot")
    if default_plot is None:
        default_plot = (
            ((raw_ui.get("components") or {}).get("plots") or {}).get("default_plot")
        )

    default_selection = raw_ui.get("default_selection")
    if default_selection is None:
        default_selection = (
            ((raw_ui.get("components") or {}).get("parameters") or {}).get("default_selection")
        )

    source = raw_data.get("source")
    if isinstance(source, dict):
        source = source.get("file_path")

    config = GlobalConfig(
        app_name=raw_app.get("name", "Parametric Data Browser"),
        app_version=raw_app.get("version"),
        app_description=raw_app.get("description"),
        parameters=parameters,
        plots=plots,
        data_source=source,
        data_root=_resolve_data_root(root, raw_global),
        default_plot=default_plot,
        default_selection=dict(default_selection or {}),
        export_prefix=raw_export.get("filename_prefix", "parametric"),
    )

    logger.info(
        "Global config loaded",
        extra={
            "config_root": str(root),
            "n_parameters": len(parameters),
            "plot_keys": config.plot_keys,
            "default_plot": default_plot,
        },
    )
    return config
