"""Abstract per-session key/value storage.

One instance represents the storage of a single client session.
Values are opaque strings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SessionStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*; no-op if it is absent."""
