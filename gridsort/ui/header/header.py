"""
Header - Table head holding a single HeaderRow.
"""
from typing import Any, Callable, List, Optional

from gridsort.core.options import require_options
from gridsort.data.collection import Collection
from gridsort.ui.header.column import Column, Columns
from gridsort.ui.header.header_cell import HeaderCell, HeaderCellRenderer, HeaderLabel
from gridsort.ui.header.header_row import ColumnsLike, HeaderRow


class Header:
    """
    Owns the column set and the header row built over it.

    Example:
        header = Header(columns=[{"name": "age"}], collection=people)
        header.render()
        header.remove()
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
        self.row = HeaderRow(
            columns=self.columns,
            collection=collection,
            header_cell=header_cell,
            renderer_factory=renderer_factory,
            model=model,
        )

    def render(self) -> List[HeaderLabel]:
        return self.row.render()

    def remove(self) -> None:
        """Tear down the row and every cell in it."""
        self.row.remove()
