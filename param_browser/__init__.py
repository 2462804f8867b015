"""
Top-level package for the parametric dataset browser.

This package exposes the core architecture (domain, services, views, UI adapters).
Most code should import from submodules such as:
    param_browser.core
    param_browser.services
    param_browser.views
    param_browser.ui
"""

__all__: list[str] = []
