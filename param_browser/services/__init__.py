"""
Service layer: dataset store, plot pipeline and export helpers.
"""

from .dataset_service import DatasetStore
from .plot_service import PlotResult, build_plot, initial_selection

__all__ = ["DatasetStore", "PlotResult", "build_plot", "initial_selection"]
