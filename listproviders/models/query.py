"""
Query models - offset/limit window requested by a list consumer.
"""
from typing import Optional

from pydantic import BaseModel, Field


class ResourceListQuery(BaseModel):
    """Pagination window for a resource list request."""
    offset: Optional[int] = Field(default=None, ge=0, description="Entries to skip")
    limit: Optional[int] = Field(default=None, ge=0, description="Maximum entries to return")

    def has_window(self) -> bool:
        """Whether the query asks for any pagination at all."""
        return self.offset is not None or self.limit is not None
