"""
Contributors list provider - people known to the directory or the index.

Names are collected from the user directory and from the contributor-like
fields of indexed events and series, de-duplicated and sorted by label.
"""
import logging
from enum import Enum
from operator import attrgetter
from typing import Any, Mapping, Optional

from ..client.search_index import EventIndexSchema, SearchIndex, SeriesIndexSchema
from ..client.user_directory import UserDirectoryService
from ..models.exclusion import ExcludedUserProviders
from ..models.query import ResourceListQuery
from ..models.user import Contributor
from .base import ResourceListProvider
from .util import filter_map


logger = logging.getLogger(__name__)

CONFIGURATION_KEY_EXCLUDE_USER_PROVIDER = "exclude.user.provider"

# (field, document type) pairs merged into the plain names list
NAME_FIELDS: list[tuple[str, str]] = [
    (EventIndexSchema.CONTRIBUTOR, EventIndexSchema.DOCUMENT_TYPE),
    (EventIndexSchema.PRESENTER, EventIndexSchema.DOCUMENT_TYPE),
    (EventIndexSchema.PUBLISHER, EventIndexSchema.DOCUMENT_TYPE),
    (SeriesIndexSchema.CONTRIBUTORS, SeriesIndexSchema.DOCUMENT_TYPE),
    (SeriesIndexSchema.ORGANIZERS, SeriesIndexSchema.DOCUMENT_TYPE),
    (SeriesIndexSchema.PUBLISHERS, SeriesIndexSchema.DOCUMENT_TYPE),
]

# (field, document type) pairs merged into the names-to-usernames list
TECHNICAL_PRESENTER_FIELDS: list[tuple[str, str]] = [
    (EventIndexSchema.PRESENTER, EventIndexSchema.DOCUMENT_TYPE),
    (EventIndexSchema.CONTRIBUTOR, EventIndexSchema.DOCUMENT_TYPE),
    (SeriesIndexSchema.CONTRIBUTORS, SeriesIndexSchema.DOCUMENT_TYPE),
    (SeriesIndexSchema.ORGANIZERS, SeriesIndexSchema.DOCUMENT_TYPE),
    (SeriesIndexSchema.PUBLISHERS, SeriesIndexSchema.DOCUMENT_TYPE),
]


class ContributorsListName(str, Enum):
    DEFAULT = "CONTRIBUTORS"
    USERNAMES = "CONTRIBUTORS.USERNAMES"
    NAMES_TO_USERNAMES = "CONTRIBUTORS.NAMES.TO.USERNAMES"

    @classmethod
    def lookup(cls, list_name: str) -> "ContributorsListName":
        """Resolve a list name case-insensitively, falling back to DEFAULT."""
        for member in cls:
            if member.value.lower() == list_name.lower():
                return member
        return cls.DEFAULT


class ContributorsListProvider(ResourceListProvider):
    """
    Lists contributors, presenters, organizers and publishers.
    """

    def __init__(
        self,
        search_index: SearchIndex,
        user_directory: UserDirectoryService,
        excluded: Optional[ExcludedUserProviders] = None,
    ):
        self.search_index = search_index
        self.user_directory = user_directory
        self._excluded = excluded or ExcludedUserProviders()
        logger.info("Contributors list provider activated")

    @property
    def excluded(self) -> ExcludedUserProviders:
        return self._excluded

    def modified(self, properties: Mapping[str, Any]) -> None:
        """
        Apply a configuration update.

        The new exclusion snapshot is built aside and swapped in with a
        single assignment, so running listings see either the old or the
        new set.
        """
        excluded = ExcludedUserProviders.parse(properties.get(CONFIGURATION_KEY_EXCLUDE_USER_PROVIDER))
        self._excluded = excluded
        logger.debug(f"Excluded user providers: {excluded}")

    def get_list_names(self) -> list[str]:
        return [name.value for name in ContributorsListName]

    def get_list(self, list_name: str, query: Optional[ResourceListQuery] = None) -> dict[str, str]:
        excluded = self._excluded
        name = ContributorsListName.lookup(list_name)
        if name is ContributorsListName.USERNAMES:
            return self._get_list_with_user_names(query, excluded)
        elif name is ContributorsListName.NAMES_TO_USERNAMES:
            return self._get_list_with_technical_presenters(query, excluded)
        else:
            return self._get_list_of_names(query, excluded)

    def _collect_users(self, excluded: ExcludedUserProviders, key_by_username: bool) -> list[Contributor]:
        """
        Turn directory accounts into contributors.

        Args:
            excluded: Exclusion snapshot for this call
            key_by_username: Key entries by login name instead of label

        Returns:
            Contributors in directory order
        """
        if excluded.excludes_all:
            return []

        contributors = []
        for user in self.user_directory.find_users("%", 0, 0):
            if excluded.excludes(user.provider):
                continue
            label = user.label
            contributors.append(Contributor(key=user.username if key_by_username else label, label=label))
        return contributors

    def _get_list_of_names(
        self,
        query: Optional[ResourceListQuery],
        excluded: ExcludedUserProviders,
    ) -> dict[str, str]:
        """All contributor names, each mapped to itself."""
        names = {contributor.label for contributor in self._collect_users(excluded, key_by_username=False)}
        for field, document_type in NAME_FIELDS:
            names.update(self.search_index.get_terms_for_field(field, document_type))

        offset = 0
        limit = 0
        if query is not None:
            if query.limit is not None:
                limit = query.limit
            if query.offset is not None:
                offset = query.offset

        # limit == 0 means no limit here, unlike filter_map
        contributors: dict[str, str] = {}
        for i, name in enumerate(sorted(names)):
            if i >= offset and (limit == 0 or i < offset + limit):
                contributors[name] = name

        logger.debug(f"Contributor names: {len(contributors)} of {len(names)}")
        return contributors

    def _get_list_with_user_names(
        self,
        query: Optional[ResourceListQuery],
        excluded: ExcludedUserProviders,
    ) -> dict[str, str]:
        """Directory users only, login name mapped to label."""
        contributors = self._collect_users(excluded, key_by_username=True)
        return filter_map(self._to_sorted_map(contributors), query)

    def _get_list_with_technical_presenters(
        self,
        query: Optional[ResourceListQuery],
        excluded: ExcludedUserProviders,
    ) -> dict[str, str]:
        """Directory users plus index names that do not belong to a user."""
        contributors = self._collect_users(excluded, key_by_username=True)
        labels = {contributor.label for contributor in contributors}
        keys = {contributor.key for contributor in contributors}

        for field, document_type in TECHNICAL_PRESENTER_FIELDS:
            index_names = self.search_index.get_terms_for_field(field, document_type)
            self._add_index_names(labels, keys, contributors, index_names)

        return filter_map(self._to_sorted_map(contributors), query)

    @staticmethod
    def _add_index_names(
        labels: set[str],
        keys: set[str],
        contributors: list[Contributor],
        index_names: list[str],
    ) -> None:
        """Add index names not already present as a label or key."""
        for index_name in index_names:
            if index_name in labels or index_name in keys:
                continue
            contributors.append(Contributor(key=index_name, label=index_name))
            labels.add(index_name)
            keys.add(index_name)

    @staticmethod
    def _to_sorted_map(contributors: list[Contributor]) -> dict[str, str]:
        contributors = sorted(contributors, key=attrgetter("label"))
        return {contributor.key: contributor.label for contributor in contributors}
