"""
Helpers shared by list providers.
"""
from itertools import islice
from typing import Optional

from ..models.query import ResourceListQuery


def filter_map(mapping: dict[str, str], query: Optional[ResourceListQuery]) -> dict[str, str]:
    """
    Cut an ordered mapping down to the query's offset/limit window.

    Without a query, or with neither offset nor limit set, the mapping is
    returned as is. A missing limit means no limit; a limit of 0 yields an
    empty mapping.

    Args:
        mapping: Ordered key/label mapping
        query: Pagination window

    Returns:
        Mapping with entries [offset, offset + limit)
    """
    if query is None or not query.has_window():
        return mapping

    offset = query.offset or 0
    stop = None if query.limit is None else offset + query.limit
    return dict(islice(mapping.items(), offset, stop))
