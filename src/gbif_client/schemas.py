"""
Response helpers.

GBIF responses are returned as plain dicts; their shape belongs to the API.
The only structure this package reads is the paging block shared by every
listing endpoint.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PAGING_KEYS = ("offset", "limit", "endOfRecords")


class PagingMeta(BaseModel):
    """Paging fields of a listing response."""

    model_config = ConfigDict(populate_by_name=True)

    offset: int | None = None
    limit: int | None = None
    end_of_records: bool | None = Field(default=None, alias="endOfRecords")
    count: int | None = None

    @property
    def next_offset(self) -> int | None:
        """Offset of the following page, or None on the last page."""
        if self.end_of_records or self.offset is None or self.limit is None:
            return None
        return self.offset + self.limit


def get_meta(result: Any) -> PagingMeta | None:
    """Extract the paging block from ``result``, if it has one."""
    if not isinstance(result, dict) or not any(k in result for k in PAGING_KEYS):
        return None
    return PagingMeta.model_validate({k: result.get(k) for k in (*PAGING_KEYS, "count")})
