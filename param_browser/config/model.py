from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from param_browser.core.exceptions import ConfigError, SchemaMissingError

DEFAULT_PRECISION = 3

DEFAULT_LINE_COLOR = "#2E86AB"
DEFAULT_LINE_WIDTH = 3
DEFAULT_MARKER_COLOR = "#A23B72"
DEFAULT_MARKER_SIZE = 6


@dataclass(frozen=True)
class ParameterConfig:
    """
    Display metadata for one independent parameter column.
    """
    name: str
    label: Optional[str] = None
    unit: str = ""
    precision: int = DEFAULT_PRECISION
    description: Optional[str] = None

    @property
    def display_label(self) -> str:
        return self.label or self.name

    @classmethod
    def from_raw(cls, name: str, raw: Optional[Mapping[str, Any]]) -> ParameterConfig:
        raw = raw or {}
        precision = raw.get("precision")
        if precision is None:
            precision = DEFAULT_PRECISION
        try:
            precision = int(precision)
        except (TypeError, ValueError):
            raise ConfigError(f"Parameter '{name}': precision must be an integer, got {precision!r}")
        if precision < 0:
            raise ConfigError(f"Parameter '{name}': precision must not be negative, got {precision}")

        return cls(
            name=name,
            label=raw.get("label"),
            unit=raw.get("unit") or "",
            precision=precision,
            description=raw.get("description"),
        )


@dataclass(frozen=True)
class PlotStyle:
    line_color: str = DEFAULT_LINE_COLOR
    line_width: float = DEFAULT_LINE_WIDTH
    marker_color: str = DEFAULT_MARKER_COLOR
    marker_size: float = DEFAULT_MARKER_SIZE

    @classmethod
    def from_raw(cls, raw: Optional[Mapping[str, Any]]) -> PlotStyle:
        raw = raw or {}
        # Falsy values fall back to defaults, same as missing keys
        return cls(
            line_color=raw.get("line_color") or DEFAULT_LINE_COLOR,
            line_width=raw.get("line_width") or DEFAULT_LINE_WIDTH,
            marker_color=raw.get("marker_color") or DEFAULT_MARKER_COLOR,
            marker_size=raw.get("marker_size") or DEFAULT_MARKER_SIZE,
        )


@dataclass(frozen=True)
class PlotSpec:
    """
    Parsed config entry for a single plot.

    `parameters` is the plot-specific parameter subset, or None when the plot
    uses every globally declared parameter.
    """
    key: str
    x_column: str
    y_column: str
    title: str
    x_label: str
    y_label: str
    style: PlotStyle = field(default_factory=PlotStyle)
    parameters: Optional[Dict[str, ParameterConfig]] = None
    enabled: bool = True
    data_source: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_raw(cls, key: str, raw: Mapping[str, Any]) -> PlotSpec:
        if not isinstance(raw, Mapping):
            raise ConfigError(f"Plot '{key}': expected an object, got {type(raw).__name__}")

        for required in ("x_column", "y_column"):
            if not raw.get(required):
                raise ConfigError(f"Plot '{key}': missing required field '{required}'")

        raw_params = raw.get("parameters")
        parameters: Optional[Dict[str, ParameterConfig]] = None
        if raw_params is not None:
            # Accept both {"name": {...}} and ["name", ...]
            if isinstance(raw_params, Mapping):
                parameters = {
                    name: ParameterConfig.from_raw(name, meta)
                    for name, meta in raw_params.items()
                }
            else:
                parameters = {name: ParameterConfig.from_raw(name, None) for name in raw_params}

        return cls(
            key=key,
            x_column=raw["x_column"],
            y_column=raw["y_column"],
            title=raw.get("title", key),
            x_label=raw.get("x_label", raw["x_column"]),
            y_label=raw.get("y_label", raw["y_column"]),
            style=PlotStyle.from_raw(raw.get("style")),
            parameters=parameters,
            enabled=raw.get("enabled") is not False,
            data_source=raw.get("data_source"),
            description=raw.get("description"),
        )


@dataclass
class GlobalConfig:
    """
    Whole-application configuration: app metadata, the global parameter list,
    the plots in declaration order, and UI/export defaults.
    """
    app_name: str
    parameters: Dict[str, ParameterConfig]
    plots: Dict[str, PlotSpec]
    data_source: Optional[str] = None
    data_root: Optional[Path] = None
    default_plot: Optional[str] = None
    default_selection: Dict[str, float] = field(default_factory=dict)
    app_version: Optional[str] = None
    app_description: Optional[str] = None
    export_prefix: str = "parametric"

    @property
    def plot_keys(self) -> List[str]:
        return list(self.plots.keys())

    def plot(self, plot_key: str) -> PlotSpec:
        try:
            return self.plots[plot_key]
        except KeyError:
            raise SchemaMissingError(plot_key) from None

    def parameter_names(self, plot_key: str) -> List[str]:
        """
        Parameter columns relevant to a plot: its own subset if declared,
        otherwise the full global list.
        """
        spec = self.plot(plot_key)
        if spec.parameters is not None:
            return list(spec.parameters.keys())
        return list(self.parameters.keys())

    def parameter_configs(self, plot_key: str) -> Dict[str, ParameterConfig]:
        """
        Display metadata for a plot's parameters. Global metadata wins over a
        bare plot-level entry so labels/units stay consistent across plots.
        """
        configs: Dict[str, ParameterConfig] = {}
        spec = self.plot(plot_key)
        for name in self.parameter_names(plot_key):
            if name in self.parameters:
                configs[name] = self.parameters[name]
            elif spec.parameters is not None:
                configs[name] = spec.parameters[name]
        return configs

    def source_for(self, plot_key: str) -> Path:
        """
        Resolve the tabular source for a plot: its own data_source if set,
        else the shared data.source, relative to data_root when not absolute.
        """
        spec = self.plot(plot_key)
        source = spec.data_source or self.data_source
        if not source:
            raise ConfigError(f"Plot '{plot_key}' has no data_source and no global data.source is configured")

        path = Path(source)
        if not path.is_absolute() and self.data_root is not None:
            path = self.data_root / path
        return path
