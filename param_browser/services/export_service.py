from __future__ import annotations

import logging
import math
from datetime import datetime
from numbers import Real
from typing import Any, List, Optional

import plotly.graph_objects as go

from param_browser.core.slice_engine import Slice
from param_browser.views.plot_config import IMAGE_EXPORT_OPTIONS

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return '"' + value.replace('"', '""') + '"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Real):
        number = float(value)
        if math.isnan(number):
            return ""
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        if number.is_integer() and abs(number) < 1e16:
            return str(int(number))
        return repr(number)
    return str(value)


def slice_to_csv(slice_: Slice) -> Optional[bytes]:
    """
    Serialise a slice's rows as delimited text: one header row, then one line
    per row in slice order. String cells are double-quoted, missing cells empty,
    numbers written at full precision.

    :return: UTF-8 bytes, or None when the slice is empty (nothing to export)
    """
    if slice_.is_empty:
        return None

    rows = slice_.rows
    headers = [str(c) for c in rows.columns]
    lines: List[str] = [",".join(headers)]
    for record in rows.itertuples(index=False, name=None):
        lines.append(",".join(_format_cell(_plain(v)) for v in record))

    logger.info("CSV export prepared", extra={"n_rows": len(rows), "columns": headers})
    return "\n".join(lines).encode("utf-8")


def _plain(value: Any) -> Any:
    # numpy scalars -> python scalars
    item = getattr(value, "item", None)
    if callable(item) and not isinstance(value, (str, bytes)):
        try:
            return item()
        except (TypeError, ValueError):
            return value
    return value


def figure_to_png(figure: go.Figure) -> bytes:
    """
    Render a figure to PNG bytes at the fixed export resolution (kaleido).
    """
    logger.info("Rendering PNG export", extra={"options": IMAGE_EXPORT_OPTIONS})
    return figure.to_image(
        format=IMAGE_EXPORT_OPTIONS["format"],
        width=IMAGE_EXPORT_OPTIONS["width"],
        height=IMAGE_EXPORT_OPTIONS["height"],
        scale=IMAGE_EXPORT_OPTIONS["scale"],
    )


def export_filename(prefix: str, kind: str, extension: str, now: Optional[datetime] = None) -> str:
    """e.g. parametric_data_2024-01-31T12-00-00.csv"""
    now = now or datetime.now()
    return f"{prefix}_{kind}_{now.strftime(TIMESTAMP_FORMAT)}.{extension}"
