"""
OData Service Interface

Defines contract for CRUD access to one NAV OData V4 entity set
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class INavODataService(ABC, Generic[T]):
    """Interface for OData V4 CRUD services"""

    @abstractmethod
    async def get_entities(
        self,
        filter: Optional[str] = None,
        filters: Optional[Sequence[str]] = None,
    ) -> List[T]:
        """
        Retrieve entities, optionally filtered.

        Args:
            filter: An OData $filter expression
            filters: Additional filter expressions to AND together

        Returns:
            Matching entities; empty when nothing matches
        """
        pass

    @abstractmethod
    async def get_entity_by_id(self, filter: str) -> T:
        """
        Retrieve the first entity matching a key filter.

        Args:
            filter: An OData $filter expression that identifies the entity

        Returns:
            The matching entity

        Raises:
            NavNotFoundError: If no entity matches
        """
        pass

    @abstractmethod
    async def create_entity(self, entity: T) -> T:
        """
        Create a new entity.

        Args:
            entity: The entity to create

        Returns:
            The created entity including server-generated fields
        """
        pass

    @abstractmethod
    async def update_entity(self, key: str, entity: T) -> T:
        """
        Update an existing entity, guarded by its ETag when it carries one.

        Args:
            key: The OData key of the entity
            entity: The entity data to apply

        Returns:
            The updated entity
        """
        pass

    @abstractmethod
    async def delete_entity(self, key: str) -> None:
        """
        Delete an entity by its key.

        Args:
            key: The OData key of the entity
        """
        pass
