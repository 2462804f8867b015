from datetime import datetime

import pandas as pd

from param_browser.core.dataset import Dataset
from param_browser.core.slice_engine import slice_dataset
from param_browser.services.export_service import export_filename, figure_to_png, slice_to_csv


def _make_slice(selection):
    frame = pd.DataFrame(
        {
            "p": [1.0, 1.0, 2.0],
            "label": pd.Series(['say "hi"', None, "x"], dtype=object),
            "x": [2.0, 1.0, 3.0],
            "y": [0.25, float("nan"), 3.0],
        }
    )
    return slice_dataset(Dataset("plot", frame), "x", "y", selection)


def test_slice_to_csv():
    content = slice_to_csv(_make_slice({"p": 1.0}))

    assert content.decode("utf-8").split("\n") == [
        "p,label,x,y",
        "1,,1,",
        '1,"say ""hi""",2,0.25',
    ]


def test_slice_to_csv_empty_is_none():
    assert slice_to_csv(_make_slice({"p": 9.0})) is None


def test_slice_to_csv_full_precision():
    frame = pd.DataFrame({"x": [0.1 + 0.2], "y": [1e-12]})
    sl = slice_dataset(Dataset("plot", frame), "x", "y", {})

    lines = slice_to_csv(sl).decode("utf-8").split("\n")

    assert lines[1] == "0.30000000000000004,1e-12"


def test_export_filename():
    now = datetime(2024, 1, 31, 12, 5, 9)
    assert export_filename("thermal", "data", "csv", now=now) == "thermal_data_2024-01-31T12-05-09.csv"


def test_figure_to_png_uses_fixed_resolution():
    class FakeFigure:
        def __init__(self):
            self.kwargs = None

        def to_image(self, **kwargs):
            self.kwargs = kwargs
            return b"png"

    fig = FakeFigure()

    assert figure_to_png(fig) == b"png"
    assert fig.kwargs == {"format": "png", "width": 800, "height": 600, "scale": 2}
