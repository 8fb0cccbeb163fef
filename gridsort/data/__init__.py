"""
Data Module - Record stores sorted by the grid header.

Usage:
    from gridsort.data import Collection, PageableCollection, Record
"""
from gridsort.data.record import Record
from gridsort.data.collection import (
    Collection,
    CollectionError,
    InvalidOrderError,
    SORT_ORDERS,
    validate_order,
)
from gridsort.data.pageable import PageableCollection, PagingMode, PagingState

__all__ = [
    "Record",
    "Collection",
    "CollectionError",
    "InvalidOrderError",
    "SORT_ORDERS",
    "validate_order",
    "PageableCollection",
    "PagingMode",
    "PagingState",
]
