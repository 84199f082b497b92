"""Abstract base class for read-only structure repositories."""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository of entities grouped by identifier.

    Structure files are the source of truth, so writes are not supported
    unless a subclass overrides them.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[List[T]]:
        """Retrieve every entity stored under an identifier."""

    @abstractmethod
    def list(self) -> Dict[str, List[T]]:
        """List all entities keyed by identifier."""

    def create(self, entity: T) -> T:
        raise NotImplementedError("Creation not supported")

    def update(self, entity: T) -> T:
        raise NotImplementedError("Updates not supported")

    def delete(self, id: str) -> None:
        raise NotImplementedError("Deletion not supported")
