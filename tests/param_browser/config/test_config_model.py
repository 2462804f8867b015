import pytest

from param_browser.config.model import (
    DEFAULT_MARKER_SIZE,
    GlobalConfig,
    ParameterConfig,
    PlotSpec,
    PlotStyle,
)
from param_browser.core.exceptions import ConfigError


def test_parameter_precision_must_be_integer():
    with pytest.raises(ConfigError, match="precision"):
        ParameterConfig.from_raw("a", {"precision": "high"})


def test_parameter_precision_from_string_number():
    assert ParameterConfig.from_raw("a", {"precision": "2"}).precision == 2


def test_style_falsy_values_use_defaults():
    style = PlotStyle.from_raw({"line_color": "#000000", "marker_size": 0})

    assert style.line_color == "#000000"
    assert style.marker_size == DEFAULT_MARKER_SIZE


def test_plot_spec_rejects_non_object():
    with pytest.raises(ConfigError):
        PlotSpec.from_raw("p", ["x", "y"])


def test_source_for_without_any_source():
    config = GlobalConfig(
        app_name="Test",
        parameters={},
        plots={"p": PlotSpec.from_raw("p", {"x_column": "x", "y_column": "y"})},
    )

    with pytest.raises(ConfigError, match="no data_source"):
        config.source_for("p")


def test_parameter_precision_must_not_be_negative():
    with pytest.raises(ConfigError, match="negative"):
        ParameterConfig.from_raw("a", {"precision": -1})


def test_parameter_precision_zero_allowed():
    assert ParameterConfig.from_raw("a", {"precision": 0}).precision == 0
