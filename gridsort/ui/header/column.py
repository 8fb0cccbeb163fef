"""
Column Data Model.

Pydantic model for column metadata: display label, sortability and the
per-column comparator/value/header-cell overrides used by header cells.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ColumnConfigurationError(ValueError):
    """Exception raised for invalid column definitions."""
    pass


# --- Sortability ---

@dataclass(frozen=True)
class Always:
    """Sortability fixed at definition time."""
    value: bool = True

    def evaluate(self, column: "Column", context: Any = None) -> bool:
        return self.value


@dataclass(frozen=True)
class ByContext:
    """Sortability decided by predicate(column, context) on every evaluation."""
    predicate: Callable[["Column", Any], bool]

    def evaluate(self, column: "Column", context: Any = None) -> bool:
        return bool(self.predicate(column, context))


Sortable = Union[Always, ByContext]


def to_sortable(value: Any) -> Sortable:
    """
    Convert a bool, a predicate or a Sortable into a Sortable.

    Raises:
        ColumnConfigurationError: For any other value
    """
    if isinstance(value, (Always, ByContext)):
        return value
    if isinstance(value, bool):
        return Always(value)
    if callable(value):
        return ByContext(value)
    raise ColumnConfigurationError(f"sortable must be a bool or a callable, got {value!r}")


# --- Column ---

class Column(BaseModel):
    """
    Metadata for a single grid column.

    Attributes:
        name: Unique key, also the record attribute sorted on
        label: Display text (defaults to name)
        sortable: bool, predicate(column, context) or a Sortable
        comparator: Base comparator override, function(a, b) -> -1/0/1
        value: Value extractor override, function(record, attr) -> value
        header_cell: Header cell class for this column (alias "headerCell")

    Example:
        column = Column(name="age", label="Age", sortable=True)
        column = Column.model_validate({"name": "age", "headerCell": MyCell})
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Unique column key")
    label: str = Field("", description="Display text")
    sortable: Any = Field(default_factory=Always, description="Sortability")
    comparator: Optional[Callable[[Any, Any], int]] = Field(None, description="Base comparator override")
    value: Optional[Callable[[Any, str], Any]] = Field(None, description="Value extractor override")
    header_cell: Optional[Callable[..., Any]] = Field(None, alias="headerCell", description="Header cell override")

    @model_validator(mode="before")
    @classmethod
    def _default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label") and data.get("name"):
            data = {**data, "label": data["name"]}
        return data

    @field_validator("sortable", mode="before")
    @classmethod
    def _coerce_sortable(cls, value: Any) -> Sortable:
        return to_sortable(value)

    def is_sortable(self, context: Any = None) -> bool:
        """Evaluate sortability now; never cached."""
        return self.sortable.evaluate(self, context)


class Columns:
    """
    Ordered, name-unique set of columns.

    Example:
        columns = Columns([{"name": "name"}, {"name": "age", "sortable": False}])
        columns.get("age").label  # "age"
    """

    def __init__(self, columns: Iterable[Union[Column, Dict[str, Any]]]):
        self._columns: List[Column] = []
        self._by_name: Dict[str, Column] = {}
        for definition in columns:
            column = definition if isinstance(definition, Column) else Column.model_validate(definition)
            if column.name in self._by_name:
                raise ColumnConfigurationError(f"Duplicate column name: {column.name!r}")
            self._columns.append(column)
            self._by_name[column.name] = column

    @classmethod
    def coerce(cls, columns: Union["Columns", Iterable[Union[Column, Dict[str, Any]]]]) -> "Columns":
        return columns if isinstance(columns, cls) else cls(columns)

    def get(self, name: str) -> Optional[Column]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [column.name for column in self._columns]

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __getitem__(self, index: int) -> Column:
        return self._columns[index]
