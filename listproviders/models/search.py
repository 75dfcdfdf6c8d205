"""
Search result models - ordered hits returned by the search index.
"""
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SearchResultItem(BaseModel, Generic[T]):
    """A single hit with its relevance score."""
    source: T
    score: float = 0.0


class SearchResult(BaseModel, Generic[T]):
    """Page of hits for a query, in the order the index returned them."""
    items: list[SearchResultItem[T]] = Field(default_factory=list)
    hit_count: int = Field(default=0, description="Total hits, regardless of pagination")
    offset: int = 0
    limit: int = 0
