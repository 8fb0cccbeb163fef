"""
Record Data Model.

Pydantic model for a single row of grid data. Attributes are free-form;
every record also carries a creation sequence number (cid) used to
restore insertion order when no column is sorted.
"""
import itertools
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, PrivateAttr

_cid_counter = itertools.count(1)


def _next_cid() -> int:
    return next(_cid_counter)


class Record(BaseModel):
    """
    Data model for a single grid row.

    Any keyword becomes an attribute; subclasses may declare typed fields.

    Example:
        record = Record(name="Alice", age=30)
        record.get("age")   # 30
        record.cid          # assigned at creation, strictly increasing
    """
    model_config = ConfigDict(extra="allow")

    _cid: int = PrivateAttr(default_factory=_next_cid)

    @property
    def cid(self) -> int:
        """Creation sequence number."""
        return self._cid

    def get(self, attr: str, default: Any = None) -> Any:
        """
        Get attribute value by name.

        Args:
            attr: Attribute name

        Returns:
            Attribute value, or default if the record has no such attribute
        """
        if attr in type(self).model_fields:
            return getattr(self, attr)
        return (self.model_extra or {}).get(attr, default)

    def set(self, attr: str, value: Any) -> None:
        setattr(self, attr, value)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def __repr__(self) -> str:
        return f"Record(cid={self._cid}, {self.model_dump()})"
