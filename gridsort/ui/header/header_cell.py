"""
HeaderCell - Sort controller for one grid column.

Clicking a sortable header cycles ascending -> descending -> none. Each
step builds a comparator, re-orders the collection (locally, or by
re-fetching a remote page) and broadcasts the new SortState on the
collection's channel. Every cell listening on that collection adopts the
broadcast, so at most one column shows an active direction.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Set, Union
from loguru import logger

from gridsort.core.events import Events
from gridsort.core.options import require_options
from gridsort.data.collection import Collection
from gridsort.data.pageable import PageableCollection, PagingMode
from gridsort.ui.header.column import Column
from gridsort.ui.header.comparator import (
    Comparator,
    ValueExtractor,
    cid_comparator,
    default_comparator,
    default_value,
    make_comparator,
)
from gridsort.ui.header.direction import Direction

DirectionLike = Union[Direction, str, None]


@dataclass(frozen=True)
class SortState:
    """Payload of the Events.GRID_SORT broadcast."""
    column_name: str
    direction: Optional[Direction]  # None when the column returned to insertion order
    comparator: Comparator
    collection: Collection


@dataclass(frozen=True)
class HeaderLabel:
    """What a header cell renders: its text and whether a sort caret is shown."""
    text: str
    sortable: bool


class HeaderCellRenderer(Protocol):
    """Visual side of a header cell, supplied by the UI toolkit."""

    def add_state(self, name: str) -> None: ...

    def remove_state(self, name: str) -> None: ...

    def render_label(self, label: HeaderLabel) -> None: ...


class HeaderCellView:
    """In-memory renderer: tracks visual states and the last rendered label."""

    def __init__(self):
        self.states: Set[str] = set()
        self.label: Optional[HeaderLabel] = None

    def add_state(self, name: str) -> None:
        self.states.add(name)

    def remove_state(self, name: str) -> None:
        self.states.discard(name)

    def render_label(self, label: HeaderLabel) -> None:
        self.label = label


class HeaderCell:
    """
    Controls sorting for a single column.

    Features:
    - Three-state click cycle (ascending, descending, insertion order)
    - Per-column comparator and value extractor overrides
    - Local, client-paged and remote (re-fetch) dispatch
    - Direction synchronised from the collection's sort broadcast

    Example:
        cell = HeaderCell(column={"name": "age"}, collection=collection)
        cell.on_activate()      # ascending
        cell.on_activate()      # descending
        cell.on_activate()      # back to insertion order
        cell.remove()
    """

    def __init__(
        self,
        column: Union[Column, Dict[str, Any], None] = None,
        collection: Optional[Collection] = None,
        *,
        comparator: Optional[Comparator] = None,
        value: Optional[ValueExtractor] = None,
        renderer: Optional[HeaderCellRenderer] = None,
        model: Any = None,
    ):
        """
        Initialize header cell.

        Args:
            column: Column or column definition dict
            collection: Collection sorted by this cell
            comparator: Base comparator when the column has none
            value: Value extractor when the column has none
            renderer: Visual collaborator (defaults to HeaderCellView)
            model: Context record handed to the sortable predicate

        Raises:
            MissingOptionError: If column or collection is missing
        """
        require_options(type(self).__name__, column=column, collection=collection)
        self.column = column if isinstance(column, Column) else Column.model_validate(column)
        self.collection = collection
        self.model = model
        self.renderer: HeaderCellRenderer = renderer if renderer is not None else HeaderCellView()

        self.comparator: Comparator = self.column.comparator or comparator or default_comparator
        self.value: ValueExtractor = self.column.value or value or default_value

        self._direction = Direction.NONE
        self._subscription = collection.events.subscribe(Events.GRID_SORT, self._reset_cell_direction)

    # --- Direction ---

    @property
    def direction(self) -> Direction:
        """Current sort direction of this column."""
        return self._direction

    def set_direction(self, direction: DirectionLike) -> Direction:
        """
        Set the direction and update the visual state.

        Args:
            direction: Direction, "ascending"/"descending"/"none", or None

        Raises:
            InvalidDirectionError: For any other value
        """
        direction = Direction.coerce(direction)
        if self._direction is not Direction.NONE:
            self.renderer.remove_state(self._direction.value)
        if direction is not Direction.NONE:
            self.renderer.add_state(direction.value)
        if direction is not self._direction:
            logger.debug(f"{self.column.name}: direction {self._direction.value} -> {direction.value}")
        self._direction = direction
        return direction

    def _reset_cell_direction(self, state: SortState) -> None:
        if state.collection is not self.collection:
            return
        if state.column_name != self.column.name:
            self.set_direction(Direction.NONE)
        else:
            self.set_direction(state.direction)

    # --- Activation ---

    def is_sortable(self, context: Any = None) -> bool:
        """Evaluate the column's sortability against context (or this cell's model)."""
        return self.column.is_sortable(self.model if context is None else context)

    def on_activate(self, context: Any = None) -> Optional[Direction]:
        """
        Handle a click on the header.

        Args:
            context: Record the sortability predicate is evaluated against

        Returns:
            The direction dispatched, or None if the column is not sortable
        """
        if not self.is_sortable(context):
            logger.debug(f"{self.column.name}: not sortable, click ignored")
            return None
        direction = self._direction.next_direction()
        self.sort(self.column.name, direction)
        return direction

    # --- Sorting ---

    def make_comparator(self, attr: Optional[str], order: Optional[int]) -> Optional[Comparator]:
        """Comparator factory bound to this cell's base comparator and value extractor."""
        return make_comparator(attr, order, comparator=self.comparator, value=self.value)

    def sort(self, column_name: str, direction: DirectionLike) -> SortState:
        """
        Sort the collection by column_name in the given direction.

        Remote pageable collections record the sorting and re-fetch the
        current page; client-mode pageable collections sort their full
        superset and re-derive the page; plain collections sort in place.
        A SortState is broadcast on the collection in every case.

        Args:
            column_name: Attribute to sort by
            direction: Target direction; none restores insertion order

        Returns:
            The broadcast SortState
        """
        direction = Direction.coerce(direction)
        order = direction.sign
        comparator = self.make_comparator(column_name, order) or cid_comparator
        collection = self.collection

        if isinstance(collection, PageableCollection):
            if collection.is_remote:
                collection.ensure_fetchable()
            collection.set_sorting(column_name if order else None, order, make_comparator=self.make_comparator)
            if collection.mode is PagingMode.CLIENT:
                full = collection.full_collection
                if full.comparator is None:
                    full.comparator = comparator
                full.sort()
            else:
                collection.fetch(reset=True)
        else:
            previous = collection.comparator
            collection.comparator = comparator
            try:
                collection.sort()
            except Exception:
                collection.comparator = previous
                raise

        logger.debug(f"Sorted {collection.name} by {column_name!r} ({direction.value})")

        state = SortState(
            column_name=column_name,
            direction=direction.broadcast_value,
            comparator=comparator,
            collection=collection,
        )
        collection.trigger(Events.GRID_SORT, state)
        return state

    # --- Rendering ---

    def render(self) -> HeaderLabel:
        """Render the label, with a sort caret when the column is sortable."""
        label = HeaderLabel(text=self.column.label, sortable=self.is_sortable())
        self.renderer.render_label(label)
        return label

    def remove(self) -> None:
        """Release the broadcast subscription. Safe to call more than once."""
        self._subscription.cancel()
