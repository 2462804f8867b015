from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import dash_bootstrap_components as dbc
from dash import html

from param_browser.config.model import DEFAULT_PRECISION, ParameterConfig
from param_browser.core.parameter_index import ParameterIndexEntry
from param_browser.core.slice_engine import Slice
from param_browser.views.plot_config import format_value


def slider_marks(entry: ParameterIndexEntry, precision: int = DEFAULT_PRECISION) -> Dict[int, str]:
    """Tick labels at both ends of a slider over an index's value positions."""
    if entry.is_empty:
        return {}
    last = entry.count - 1
    return {
        0: format_value(entry.values[0], precision),
        last: format_value(entry.values[last], precision),
    }


def value_at_position(entry: ParameterIndexEntry, position: Any) -> Optional[float]:
    """Map a slider position back to the indexed value, or None if out of range."""
    if position is None or entry.is_empty:
        return None
    try:
        pos = int(position)
    except (TypeError, ValueError):
        return None
    if 0 <= pos < entry.count:
        return entry.values[pos]
    return None


def current_value_text(value: Optional[float], meta: ParameterConfig) -> str:
    if value is None:
        return "Current: n/a"
    return f"Current: {format_value(value, meta.precision)}{meta.unit}"


def parameter_heading(meta: ParameterConfig) -> str:
    if meta.unit:
        return f"{meta.display_label} ({meta.unit})"
    return meta.display_label


def range_text(bounds: Optional[Tuple[float, float]], precision: Optional[int] = None) -> str:
    if bounds is None:
        return "N/A"
    low, high = bounds
    if precision is None:
        return f"{_compact(low)}-{_compact(high)}"
    return f"{low:.{precision}f}-{high:.{precision}f}"


def _compact(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def info_card_values(slice_: Optional[Slice], n_parameters: int) -> List[Tuple[str, str]]:
    """
    (number, label) pairs for the four info cards: data points, parameters,
    x range, y range.
    """
    if slice_ is None:
        return [
            ("0", "Data Points"),
            (str(n_parameters), "Parameters"),
            ("N/A", "X-axis Range"),
            ("N/A", "Y-axis Range"),
        ]
    return [
        (str(slice_.data_points), "Data Points"),
        (str(n_parameters), "Parameters"),
        (range_text(slice_.x_range()), f"{slice_.x_column or 'X-axis'} Range"),
        (range_text(slice_.y_range(), precision=3), f"{slice_.y_column or 'Y-axis'} Range"),
    ]


def build_info_cards(values: Sequence[Tuple[str, str]]) -> List[dbc.Col]:
    return [
        dbc.Col(
            dbc.Card(
                dbc.CardBody(
                    [
                        html.Div(number, className="pb-card-number h4 mb-0"),
                        html.Small(label, className="pb-card-label text-muted"),
                    ]
                ),
                className="pb-info-card text-center",
            ),
            md=3,
        )
        for number, label in values
    ]


def selection_list_items(
    selection: Dict[str, Any],
    parameters: Dict[str, ParameterConfig],
) -> List[html.Li]:
    items: List[html.Li] = []
    for name, value in selection.items():
        meta = parameters.get(name) or ParameterConfig(name=name)
        items.append(
            html.Li(f"{meta.display_label}: {format_value(value, meta.precision)}{meta.unit}")
        )
    return items
