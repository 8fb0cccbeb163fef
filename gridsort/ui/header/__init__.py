"""
Header Module - Sortable grid header.

Usage:
    from gridsort.ui.header import Header, Direction

    header = Header(columns=[{"name": "name"}, {"name": "age"}], collection=people)
    header.row.activate("age")
    header.row.directions()["age"]  # Direction.ASCENDING
"""
from gridsort.ui.header.direction import Direction, InvalidDirectionError
from gridsort.ui.header.comparator import (
    cid_comparator,
    default_comparator,
    default_value,
    make_comparator,
)
from gridsort.ui.header.column import (
    Always,
    ByContext,
    Column,
    ColumnConfigurationError,
    Columns,
    Sortable,
)
from gridsort.ui.header.header_cell import (
    HeaderCell,
    HeaderCellRenderer,
    HeaderCellView,
    HeaderLabel,
    SortState,
)
from gridsort.ui.header.header_row import HeaderRow
from gridsort.ui.header.header import Header

__all__ = [
    # Direction
    "Direction",
    "InvalidDirectionError",
    # Comparators
    "make_comparator",
    "default_comparator",
    "default_value",
    "cid_comparator",
    # Columns
    "Column",
    "Columns",
    "ColumnConfigurationError",
    "Sortable",
    "Always",
    "ByContext",
    # Cells
    "HeaderCell",
    "HeaderCellRenderer",
    "HeaderCellView",
    "HeaderLabel",
    "SortState",
    # Composition
    "HeaderRow",
    "Header",
]
