from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional

import plotly.graph_objects as go

from param_browser.config.model import DEFAULT_PRECISION, ParameterConfig, PlotSpec
from param_browser.core.slice_engine import Slice

FONT_FAMILY = "Arial, sans-serif"
AXIS_TITLE_COLOR = "#495057"
TICK_COLOR = "#6c757d"
GRID_COLOR = "rgba(128, 128, 128, 0.2)"
AXIS_LINE_COLOR = "#dee2e6"

EMPTY_MESSAGE = "No data points match the current selection"

# Fixed target resolution for image export (browser button and server-side PNG)
IMAGE_EXPORT_OPTIONS: Dict[str, Any] = {
    "format": "png",
    "height": 600,
    "width": 800,
    "scale": 2,
}


@dataclass(frozen=True)
class PlotConfig:
    """
    Renderer-agnostic plot description.

    `data` and `layout` follow the Plotly figure schema so they can be handed
    to dcc.Graph or plotly.graph_objects as-is; `config` is the graph config
    block (mode bar, image export options); `summary` is the human-readable
    selection string shown under the title.
    """
    data: List[Dict[str, Any]]
    layout: Dict[str, Any]
    config: Dict[str, Any]
    summary: str
    data_points: int = 0
    filename: str = "plot"
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_figure(self) -> go.Figure:
        return go.Figure(data=self.data, layout=self.layout)

    def to_dict(self) -> Dict[str, Any]:
        return {"data": self.data, "layout": self.layout, "config": self.config}


def format_value(value: Any, precision: int = DEFAULT_PRECISION) -> str:
    """Fixed-precision rendering for numbers; anything else via str()."""
    if isinstance(value, Real) and not isinstance(value, bool):
        return f"{float(value):.{precision}f}"
    if value is None:
        return "n/a"
    return str(value)


def selection_summary(
    selection: Mapping[str, Any],
    parameters: Mapping[str, ParameterConfig],
) -> str:
    """
    "<label>: <value><unit>" for every selected parameter, in selection order.
    Parameters without display metadata use their column name and 3 decimals.
    """
    parts: List[str] = []
    for name, value in selection.items():
        meta = parameters.get(name)
        if meta is None:
            parts.append(f"{name}: {format_value(value)}")
            continue
        parts.append(f"{meta.display_label}: {format_value(value, meta.precision)}{meta.unit}")
    return ", ".join(parts)


def _axis(title: str) -> Dict[str, Any]:
    return {
        "title": {
            "text": title,
            "font": {"size": 14, "color": AXIS_TITLE_COLOR, "family": FONT_FAMILY},
        },
        "showgrid": True,
        "gridcolor": GRID_COLOR,
        "gridwidth": 1,
        "zeroline": False,
        "showline": True,
        "linecolor": AXIS_LINE_COLOR,
        "linewidth": 1,
        "tickfont": {"size": 12, "color": TICK_COLOR},
    }


def _graph_config(filename: str) -> Dict[str, Any]:
    return {
        "displayModeBar": True,
        "displaylogo": False,
        "responsive": True,
        "modeBarButtonsToRemove": ["autoScale2d", "lasso2d", "select2d", "toggleSpikelines"],
        "modeBarButtonsToAdd": ["pan2d"],
        "toImageButtonOptions": {**IMAGE_EXPORT_OPTIONS, "filename": filename},
    }


def assemble_plot_config(
    slice_: Slice,
    selection: Mapping[str, Any],
    plot_spec: PlotSpec,
    parameters: Mapping[str, ParameterConfig],
    filename: Optional[str] = None,
) -> PlotConfig:
    """
    Build the declarative plot description for one slice.

    Pure: reads the slice and plot spec, touches no rendering state. An empty slice
    still yields a valid config, with an empty series and a centred message.

    :param slice_: the computed slice (full-precision values are kept in the series)
    :param selection: the selection the slice was computed for; drives the summary
    :param plot_spec: axis labels, title and style for this plot
    :param parameters: display metadata (label/unit/precision) per parameter
    :param filename: base filename for the browser image export
    """
    style = plot_spec.style
    summary = selection_summary(selection, parameters)
    filename = filename or plot_spec.key

    series = {
        "x": list(slice_.x),
        "y": list(slice_.y),
        "type": "scatter",
        "mode": "lines+markers",
        "name": plot_spec.title,
        "line": {
            "color": style.line_color,
            "width": style.line_width,
            "shape": "linear",
        },
        "marker": {
            "color": style.marker_color,
            "size": style.marker_size,
            "opacity": 0.8,
        },
        "hovertemplate": (
            "<b>Data Point</b><br>"
            f"{plot_spec.x_label}: %{{x}}<br>"
            f"{plot_spec.y_label}: %{{y:.3f}}<br>"
            "<extra></extra>"
        ),
    }

    title_text = plot_spec.title
    if summary:
        title_text = f"{title_text}<br><sub style=\"font-size:12px;color:#666;\">{summary}</sub>"

    layout: Dict[str, Any] = {
        "title": {
            "text": title_text,
            "font": {"size": 18, "color": "#343a40", "family": FONT_FAMILY},
            "x": 0.5,
            "xanchor": "center",
        },
        "xaxis": _axis(plot_spec.x_label),
        "yaxis": _axis(plot_spec.y_label),
        "hovermode": "closest",
        "showlegend": False,
        "plot_bgcolor": "white",
        "paper_bgcolor": "white",
        "margin": {"l": 70, "r": 30, "t": 80, "b": 60},
        "font": {"family": FONT_FAMILY, "size": 12, "color": AXIS_TITLE_COLOR},
    }

    if slice_.is_empty:
        layout["annotations"] = [
            {
                "text": EMPTY_MESSAGE,
                "showarrow": False,
                "xref": "paper",
                "yref": "paper",
                "x": 0.5,
                "y": 0.5,
                "font": {"size": 14, "color": TICK_COLOR},
            }
        ]

    return PlotConfig(
        data=[series],
        layout=layout,
        config=_graph_config(filename),
        summary=summary,
        data_points=slice_.data_points,
        filename=filename,
        meta={
            "plot_key": plot_spec.key,
            "x_column": slice_.x_column,
            "y_column": slice_.y_column,
        },
    )
