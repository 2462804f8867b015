from .plot_config import PlotConfig, assemble_plot_config, selection_summary

__all__ = ["PlotConfig", "assemble_plot_config", "selection_summary"]
