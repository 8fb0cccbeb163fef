"""
Core - events, configuration, logging and option checks.
"""
from gridsort.core.config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    PagingSettings,
    QueryParamSettings,
)
from gridsort.core.events import Signal, Subscription, EventChannel, Events
from gridsort.core.logging import setup_logging
from gridsort.core.options import MissingOptionError, require_options

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "PagingSettings",
    "QueryParamSettings",
    "Signal",
    "Subscription",
    "EventChannel",
    "Events",
    "setup_logging",
    "MissingOptionError",
    "require_options",
]
