"""
HeaderRow - Composes one HeaderCell per column over a shared collection.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional, Union
from loguru import logger

from gridsort.core.options import require_options
from gridsort.data.collection import Collection
from gridsort.ui.header.column import Column, Columns
from gridsort.ui.header.direction import Direction
from gridsort.ui.header.header_cell import HeaderCell, HeaderCellRenderer, HeaderLabel

ColumnsLike = Union[Columns, Iterable[Union[Column, Dict[str, Any]]]]


class HeaderRow:
    """
    Row of header cells sharing one collection.

    The cell type of each column is resolved once, at construction:
    the column's own ``header_cell``, else the row's ``header_cell``,
    else HeaderCell.

    Example:
        row = HeaderRow(columns=[{"name": "name"}, {"name": "age"}], collection=people)
        row.activate("age")
        row.directions()  # {"name": Direction.NONE, "age": Direction.ASCENDING}
        row.remove()
    """

    def __init__(
        self,
        columns: Optional[ColumnsLike] = None,
        collection: Optional[Collection] = None,
        *,
        header_cell: Optional[Callable[..., HeaderCell]] = None,
        renderer_factory: Optional[Callable[[Column], HeaderCellRenderer]] = None,
        model: Any = None,
    ):
        require_options(type(self).__name__, columns=columns, collection=collection)
        self.columns = Columns.coerce(columns)
        self.collection = collection
        self.header_cell = header_cell
        self.renderer_factory = renderer_factory
        self.model = model
        self.cells: List[HeaderCell] = [self.make_cell(column) for column in self.columns]
        logger.debug(f"HeaderRow built {len(self.cells)} cells for {collection.name}")

    def make_cell(self, column: Column) -> HeaderCell:
        cell_type = column.header_cell or self.header_cell or HeaderCell
        renderer = self.renderer_factory(column) if self.renderer_factory else None
        return cell_type(column=column, collection=self.collection, renderer=renderer, model=self.model)

    # --- Queries ---

    def cell_for(self, name: str) -> HeaderCell:
        """
        Raises:
            KeyError: If no column has that name
        """
        for cell in self.cells:
            if cell.column.name == name:
                return cell
        raise KeyError(name)

    def directions(self) -> Dict[str, Direction]:
        return {cell.column.name: cell.direction for cell in self.cells}

    def active_column(self) -> Optional[str]:
        """Name of the column currently sorted on, if any."""
        for cell in self.cells:
            if cell.direction is not Direction.NONE:
                return cell.column.name
        return None

    # --- Actions ---

    def activate(self, name: str, context: Any = None) -> Optional[Direction]:
        """Forward a header click to the named column."""
        return self.cell_for(name).on_activate(context)

    def render(self) -> List[HeaderLabel]:
        return [cell.render() for cell in self.cells]

    def remove(self) -> None:
        """Release every cell's subscriptions."""
        for cell in self.cells:
            cell.remove()
