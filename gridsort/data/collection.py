"""
Collection - In-memory record store.

Holds an ordered list of records, an optional two-argument comparator and
the EventChannel used to broadcast changes to the header and the body.
"""
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union
from loguru import logger

from gridsort.core.events import EventChannel, Events
from gridsort.data.record import Record

Comparator = Callable[[Any, Any], int]
RecordLike = Union[Record, dict]

# Sort signs understood by comparator factories and pageable collections
SORT_ORDERS = (-1, 1)


class CollectionError(RuntimeError):
    """Exception raised when a collection cannot perform the requested operation."""
    pass


class InvalidOrderError(ValueError):
    """Exception raised for a sort order other than -1, 1 or None."""
    pass


def validate_order(order: Optional[int]) -> Optional[int]:
    """Return order unchanged if it is -1, 1 or None; raise otherwise."""
    if order is None or (order in SORT_ORDERS and not isinstance(order, bool)):
        return order
    raise InvalidOrderError(f"Sort order must be -1, 1 or None, got {order!r}")


def to_record(item: RecordLike) -> Record:
    if isinstance(item, Record):
        return item
    if isinstance(item, dict):
        return Record(**item)
    raise TypeError(f"Expected Record or dict, got {type(item).__name__}")


class Collection:
    """
    Ordered set of records sorted locally.

    Example:
        collection = Collection([{"age": 30}, {"age": 10}])
        collection.comparator = lambda a, b: a.get("age") - b.get("age")
        collection.sort()
        collection.pluck("age")  # [10, 30]
    """

    def __init__(
        self,
        records: Optional[Iterable[RecordLike]] = None,
        comparator: Optional[Comparator] = None,
        name: str = "Collection",
    ):
        self.name = name
        self.comparator: Optional[Comparator] = comparator
        self.events = EventChannel(name)
        self.records: List[Record] = [to_record(r) for r in records or []]
        if self.comparator is not None and self.records:
            self.sort(silent=True)

    # --- Contents ---

    def add(self, items: Union[RecordLike, Iterable[RecordLike]]) -> List[Record]:
        """
        Append one or more records, keeping comparator order if one is set.

        Args:
            items: Record, dict, or an iterable of either

        Returns:
            The added records
        """
        if isinstance(items, (Record, dict)):
            items = [items]
        added = [to_record(item) for item in items]
        self.records.extend(added)
        if self.comparator is not None:
            self.sort(silent=True)
        self.trigger(Events.COLLECTION_ADD, added, self)
        return added

    def reset(self, items: Optional[Iterable[RecordLike]] = None) -> None:
        """Replace the whole contents."""
        self.records = [to_record(item) for item in items or []]
        if self.comparator is not None and self.records:
            self.sort(silent=True)
        self.trigger(Events.COLLECTION_RESET, self)

    # --- Ordering ---

    def sort(self, silent: bool = False) -> "Collection":
        """
        Re-order records with the active comparator (stable).

        Raises:
            CollectionError: If no comparator is set
        """
        if self.comparator is None:
            raise CollectionError(f"{self.name}: cannot sort a set without a comparator")
        self.records.sort(key=cmp_to_key(self.comparator))
        logger.debug(f"{self.name}: sorted {len(self.records)} records")
        if not silent:
            self.trigger(Events.COLLECTION_SORT, self)
        return self

    # --- Events ---

    def trigger(self, event: str, *args) -> None:
        """Publish an event on this collection's channel."""
        self.events.publish(event, *args)

    # --- Access ---

    def pluck(self, attr: str) -> List[Any]:
        return [record.get(attr) for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, size={len(self.records)})"
