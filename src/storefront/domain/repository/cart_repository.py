"""Abstract repository for carts, one per client session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self, session_id: str) -> Cart:
        """Return the session's cart, or an empty cart."""

    @abstractmethod
    def save(self, session_id: str, cart: Cart) -> None:
        """Persist the whole cart for the session."""

    @abstractmethod
    def clear(self, session_id: str) -> None:
        """Drop the session's cart entirely."""
