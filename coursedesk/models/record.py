"""Raw record shape as returned by the Living Apps record store."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlmodel import Field, SQLModel


class RawRecord(SQLModel):
    """One stored record with its store-managed metadata.

    ``fields`` is untrusted: any key may be missing and values are not
    type-checked until the record is converted to its local shape.
    """

    record_id: str
    createdat: Optional[str] = None
    updatedat: Optional[str] = None
    fields: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["RawRecord"]
