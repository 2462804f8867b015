from __future__ import annotations

from typing import Dict


class ParamBrowserError(Exception):
    """Base exception for all param_browser errors"""
    pass


class ConfigError(ParamBrowserError):
    """Invalid or inconsistent global.json / plot config"""
    pass


class SchemaMissingError(ConfigError, KeyError):
    """A plot key was referenced but no plot with that key is configured"""

    def __init__(self, plot_key: str):
        self.plot_key = plot_key
        super().__init__(f"Plot configuration not found for: {plot_key}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class SourceUnavailableError(ParamBrowserError):
    """
    Tabular source for a plot could not be read or parsed:
    missing file, unreadable file, no header row, etc
    """

    def __init__(self, plot_key: str, path: object, reason: str):
        self.plot_key = plot_key
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load data for {plot_key} from {path}: {reason}")


class DatasetLoadError(ParamBrowserError):
    """
    Raised by DatasetStore.load_all when one or more plots failed to load.
    Plots that loaded successfully stay registered.
    """

    def __init__(self, failures: Dict[str, ParamBrowserError]):
        self.failures = dict(failures)
        details = "; ".join(f"{key}: {err}" for key, err in self.failures.items())
        super().__init__(f"{len(self.failures)} plot(s) failed to load: {details}")
