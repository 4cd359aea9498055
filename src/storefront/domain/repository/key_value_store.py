"""Abstract key-value store used for the local persistence snapshot.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent.

        Raises PersistenceError if the medium cannot be read.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one.

        Raises PersistenceError if the medium cannot be written.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key; absent keys are ignored."""
