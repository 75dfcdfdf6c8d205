"""Resource list providers."""

from .base import ResourceListProvider
from .contributors import ContributorsListName, ContributorsListProvider
from .themes import ThemesListName, ThemesListProvider
from .util import filter_map

__all__ = [
    "ResourceListProvider",
    "ContributorsListName",
    "ContributorsListProvider",
    "ThemesListName",
    "ThemesListProvider",
    "filter_map",
]
