from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from param_browser.config.model import GlobalConfig
from param_browser.services.dataset_service import DatasetStore


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    store: DatasetStore
    default_plot_key: Optional[str] = None
    # plot key -> error message for plots whose data failed to load
    load_errors: Dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Ensure the store is attached to the same config the UI was built from."""
        if self.store.config is not self.global_config:
            raise RuntimeError("AppConfig.store was built from a different GlobalConfig.")

    def plot_available(self, plot_key: Optional[str]) -> bool:
        return plot_key is not None and self.store.is_loaded(plot_key)
