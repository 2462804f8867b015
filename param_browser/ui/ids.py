from __future__ import annotations

__all__ = ["IDs", "slider_id", "current_value_id"]


class IDs:
    class Store:
        SELECTION = "selection-state"

    class Control:
        # Plot selection
        PLOT_TABS = "plot-tabs"
        PLOT_TABS_CONTAINER = "plot-tabs-container"

        # Sidebar
        PARAMETER_PANEL = "parameter-panel"
        DATA_POINTS_COUNT = "data-points-count"
        SELECTION_SUMMARY = "selection-summary"

        # Graph + info cards
        MAIN_GRAPH = "main-graph"
        INFO_CARDS = "info-cards"
        LOAD_ALERT = "load-alert"

        # Downloads
        DOWNLOAD_CSV_BTN = "download-csv-btn"
        DOWNLOAD_CSV = "download-csv"
        DOWNLOAD_PNG_BTN = "download-png-btn"
        DOWNLOAD_PNG = "download-png"
        DOWNLOAD_STATUS = "download-status"

    class Pattern:
        # pattern-matching "type" strings
        SLIDER = "param-slider"
        CURRENT_VALUE = "param-current-value"


def slider_id(parameter: str) -> dict:
    return {"type": IDs.Pattern.SLIDER, "index": parameter}


def current_value_id(parameter: str) -> dict:
    return {"type": IDs.Pattern.CURRENT_VALUE, "index": parameter}
