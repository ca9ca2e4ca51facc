import asyncio
import logging
from typing import Generic, Optional
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from app.domain.repositories_interfaces.entity_mapper import EntityMapperInterface, EntityT, WireT


logger = logging.getLogger('repositories')


class EntityRepository(Generic[EntityT, WireT]):
    """
    Generic CRUD over one collection of the document store.

    Entities cross this boundary in their hydrated form and are stored in their wire form,
    the conversion is delegated to the mapper. db_read and db_update skip the mapper for
    callers that only need the stored fields.
    """

    def __init__(self, store: DocumentStoreInterface, collection: str, wire_model: type[WireT],
                 mapper: EntityMapperInterface[EntityT, WireT]):
        self.store = store
        self.collection = collection
        self.wire_model = wire_model
        self.mapper = mapper

    async def create(self, entity: EntityT) -> EntityT:
        wire = await self.mapper.to_wire(entity)
        doc_id = await self.store.add(self.collection, wire.model_dump(by_alias=True))
        logger.info(f"Created {self.collection}:{doc_id}")
        return await self.mapper.from_wire(doc_id, wire)

    async def read(self, doc_id: str) -> Optional[EntityT]:
        wire = await self.db_read(doc_id)
        if wire is None:
            return None
        return await self.mapper.from_wire(doc_id, wire)

    async def db_read(self, doc_id: str) -> Optional[WireT]:
        data = await self.store.get(self.collection, doc_id)
        if data is None:
            return None
        return self.wire_model.model_validate(data)

    async def read_all(self) -> list[EntityT]:
        documents = await self.store.get_all(self.collection)
        return list(await asyncio.gather(
            *(self.mapper.from_wire(doc_id, self.wire_model.model_validate(data)) for doc_id, data in documents)
        ))

    async def update(self, doc_id: str, entity: EntityT) -> EntityT:
        # No existence check, the store creates the document if the id is stale
        wire = await self.mapper.to_wire(entity)
        await self.db_update(doc_id, wire)
        return entity.model_copy(update={'id': doc_id})

    async def db_update(self, doc_id: str, wire: WireT) -> WireT:
        await self.store.set(self.collection, doc_id, wire.model_dump(by_alias=True))
        return wire

    async def delete(self, doc_id: str) -> None:
        await self.store.delete(self.collection, doc_id)
        logger.info(f"Deleted {self.collection}:{doc_id}")
