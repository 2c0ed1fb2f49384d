"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List

T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Abstracts data access - could be in-memory, a file, a database, etc.
    Entities are keyed by a positive integer id.
    """

    @abstractmethod
    def get(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities in storage order."""
        pass

    @abstractmethod
    def save(self, entity: T) -> T:
        """Save entity (create or update)."""
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Delete entity by ID. Returns True if deleted, False if not found."""
        pass

    def exists(self, id: int) -> bool:
        """Check whether an entity is stored under ID."""
        return self.get(id) is not None

    def count(self) -> int:
        """Number of stored entities."""
        return len(self.list())

    def next_id(self) -> int:
        """Id for the next inserted entity.

        Ids follow the stored count; an id already taken (possible after a
        delete) is skipped rather than overwritten.
        """
        candidate = self.count() + 1
        while self.exists(candidate):
            candidate += 1
        return candidate
