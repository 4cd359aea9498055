"""Abstract repository for the persisted StoreSnapshot."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.snapshot import StoreSnapshot


class SnapshotRepository(ABC):

    @abstractmethod
    def load(self) -> StoreSnapshot:
        """Return the persisted snapshot, or an empty one if none is usable.

        Never raises: absent or unreadable state falls back to empty.
        """

    @abstractmethod
    def save(self, snapshot: StoreSnapshot) -> bool:
        """Persist the snapshot; report False on failure instead of raising."""

    @abstractmethod
    def clear(self) -> None:
        """Forget all persisted state."""
