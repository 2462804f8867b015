"""
Config package for param_browser.

Responsible for:
- config models (GlobalConfig, PlotSpec, ParameterConfig, PlotStyle)
- config I/O helpers (load_global_config)
"""

from .model import GlobalConfig, ParameterConfig, PlotSpec, PlotStyle
from .loader import load_global_config

__all__ = ["GlobalConfig", "ParameterConfig", "PlotSpec", "PlotStyle", "load_global_config"]
