from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from pydantic import BaseModel


EntityT = TypeVar('EntityT', bound=BaseModel)
WireT = TypeVar('WireT', bound=BaseModel)


class EntityMapperInterface(ABC, Generic[EntityT, WireT]):
    @abstractmethod
    async def to_wire(self, entity: EntityT) -> WireT:
        """
        Converts the hydrated entity to the stored form, replacing related objects with their ids.
        """
        raise NotImplementedError

    @abstractmethod
    async def from_wire(self, doc_id: str, wire: WireT) -> EntityT:
        """
        Builds the hydrated entity from the stored form, resolving related ids to objects.
        Ids that don't resolve are dropped.
        """
        raise NotImplementedError
