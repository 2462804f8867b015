from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Mapping, NamedTuple, Optional

from param_browser.config.model import GlobalConfig
from param_browser.core.dataset import Dataset, RowsLike
from param_browser.core.dataset_loader import load_plot_dataset
from param_browser.core.exceptions import DatasetLoadError, ParamBrowserError, SchemaMissingError
from param_browser.core.parameter_index import ParameterIndexEntry, build_index

logger = logging.getLogger(__name__)

ParameterIndex = Dict[str, ParameterIndexEntry]
PlotLoader = Callable[[GlobalConfig, str], Dataset]


class _Entry(NamedTuple):
    dataset: Dataset
    index: ParameterIndex


class DatasetStore(Mapping[str, Dataset]):
    """
    Central registry of loaded datasets, one per configured plot key.

    Implements the Mapping interface over the *loaded* plots (dict-like).

    Design Notes:
    - Each plot key maps to one (Dataset, parameter index) pair. The pair is
      replaced with a single assignment on reload, so a reader sees either the
      old pair or the fully rebuilt new one
    - Indices are built once per registration and reused for every slice
    - Plot keys must exist in the GlobalConfig; disabled plots can still be
      loaded on request but never win the default-plot choice
    """

    def __init__(self, config: GlobalConfig, loader: PlotLoader = load_plot_dataset):
        self._config = config
        self._loader = loader
        self._entries: Dict[str, _Entry] = {}

    @property
    def config(self) -> GlobalConfig:
        return self._config

    # ------------------------------------------------------------------
    # Registration / loading
    # ------------------------------------------------------------------
    def register(self, plot_key: str, rows: RowsLike) -> Dataset:
        """
        Register rows for a plot and (re)build its parameter index.

        Re-registering a plot key replaces the previous dataset and index.

        :param plot_key: a configured plot key
        :param rows: a Dataset, a DataFrame, or an iterable of row mappings
        :return: the registered Dataset
        :raises SchemaMissingError: if the plot key is not configured
        """
        parameter_names = self._config.parameter_names(plot_key)

        if isinstance(rows, Dataset):
            dataset = rows
        else:
            dataset = Dataset(plot_key=plot_key, rows=rows)

        index = build_index(dataset, parameter_names)
        replaced = plot_key in self._entries
        self._entries[plot_key] = _Entry(dataset=dataset, index=index)

        empty = [name for name, entry in index.items() if entry.is_empty]
        if empty:
            logger.warning(
                "Parameters with no valid values",
                extra={"plot_key": plot_key, "parameters": empty},
            )

        logger.info(
            "Dataset registered",
            extra={
                "plot_key": plot_key,
                "n_rows": dataset.n_rows,
                "parameters": {name: entry.count for name, entry in index.items()},
                "replaced": replaced,
            },
        )
        return dataset

    def load_plot(self, plot_key: str) -> Dataset:
        """
        Read a plot's source through the loader and register it.

        :raises SchemaMissingError: if the plot key is not configured
        :raises SourceUnavailableError: if the source cannot be read; any
            previously registered data for the plot is left untouched
        """
        self._config.plot(plot_key)
        dataset = self._loader(self._config, plot_key)
        return self.register(plot_key, dataset)

    def load_all(self) -> None:
        """
        Load every configured plot, enabled or not, in configuration order.

        Plots that load are registered even if others fail.

        :raises DatasetLoadError: listing every plot that failed
        """
        failures: Dict[str, ParamBrowserError] = {}
        for plot_key in self._config.plot_keys:
            try:
                self.load_plot(plot_key)
            except ParamBrowserError as e:
                logger.error(
                    "Failed to load plot data",
                    extra={"plot_key": plot_key, "error": str(e)},
                )
                failures[plot_key] = e

        logger.info(
            "All plot data loaded",
            extra={
                "n_loaded": len(self._entries),
                "n_failed": len(failures),
                "plot_keys": list(self._entries.keys()),
            },
        )

        if failures:
            raise DatasetLoadError(failures)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def _entry(self, plot_key: str) -> _Entry:
        self._config.plot(plot_key)
        try:
            return self._entries[plot_key]
        except KeyError:
            raise KeyError(f"Plot '{plot_key}' is configured but has no data loaded") from None

    def get_dataset(self, plot_key: str) -> Dataset:
        """
        :raises SchemaMissingError: if the plot key is not configured
        :raises KeyError: if it is configured but not loaded
        """
        return self._entry(plot_key).dataset

    def get_index(self, plot_key: str) -> ParameterIndex:
        """Parameter index for a loaded plot (same errors as get_dataset)."""
        return self._entry(plot_key).index

    def get_entry(self, plot_key: str) -> tuple[Dataset, ParameterIndex]:
        """Dataset and index read together, from the same registration."""
        entry = self._entry(plot_key)
        return entry.dataset, entry.index

    def is_loaded(self, plot_key: str) -> bool:
        return plot_key in self._entries

    def parameter_names(self, plot_key: str) -> List[str]:
        return self._config.parameter_names(plot_key)

    # ------------------------------------------------------------------
    # Default plot resolution
    # ------------------------------------------------------------------
    def enabled_plot_keys(self) -> List[str]:
        return [key for key, spec in self._config.plots.items() if spec.enabled]

    def default_plot_key(self) -> Optional[str]:
        """
        Which plot should be active:

        1) the configured default plot, if it exists and is enabled
        2) otherwise the first enabled plot in configuration order
        3) otherwise None (no enabled plots); callers must handle it
        """
        enabled = self.enabled_plot_keys()
        default = self._config.default_plot
        if default is not None and default in enabled:
            return default
        if default is not None:
            logger.info(
                "Configured default plot unavailable; falling back",
                extra={"default_plot": default, "enabled_plots": enabled},
            )
        return enabled[0] if enabled else None

    # ------------------------------------------------------------------
    # Mapping protocol (loaded plots only)
    # ------------------------------------------------------------------
    def __getitem__(self, plot_key: str) -> Dataset:
        return self.get_dataset(plot_key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, plot_key: object) -> bool:
        return plot_key in self._entries
