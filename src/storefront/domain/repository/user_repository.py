"""Abstract repository for user profiles."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""

    @abstractmethod
    def update_address(self, user_id: str, address: str) -> None:
        """Store *address* as the user's shipping address."""
