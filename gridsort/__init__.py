"""
gridsort - Sortable grid header

Column sort-state machine and comparator composition for data grids,
over local, client-paged and remote record collections.
"""

__version__ = "0.1.0"

# Core systems
from gridsort.core.config import ConfigManager, AppConfig
from gridsort.core.events import Signal, Subscription, EventChannel, Events
from gridsort.core.logging import setup_logging
from gridsort.core.options import MissingOptionError

# Data
from gridsort.data import Record, Collection, PageableCollection, PagingMode

# Header
from gridsort.ui.header import (
    Column,
    Columns,
    Direction,
    Header,
    HeaderCell,
    HeaderRow,
    SortState,
    make_comparator,
)

__all__ = [
    "ConfigManager",
    "AppConfig",
    "Signal",
    "Subscription",
    "EventChannel",
    "Events",
    "setup_logging",
    "MissingOptionError",
    "Record",
    "Collection",
    "PageableCollection",
    "PagingMode",
    "Column",
    "Columns",
    "Direction",
    "Header",
    "HeaderCell",
    "HeaderRow",
    "SortState",
    "make_comparator",
]
