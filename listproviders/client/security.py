"""
Security context - organization and identity of the current caller.
"""
from typing import Protocol

from ..models.user import Organization, User


class SecurityService(Protocol):
    def get_organization(self) -> Organization:
        ...

    def get_user(self) -> User:
        ...


class StaticSecurityService:
    """Security context fixed at construction time."""

    def __init__(self, organization: Organization, user: User):
        self._organization = organization
        self._user = user

    def get_organization(self) -> Organization:
        return self._organization

    def get_user(self) -> User:
        return self._user
