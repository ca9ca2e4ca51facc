import asyncio
import logging
from app.domain.collections import ENTITY_NAMES
from app.domain.exceptions import EntityNotFoundError
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from app.domain.repositories_interfaces.reference_repo import ReferenceRepoInterface


logger = logging.getLogger('repositories')


class ReferenceRepo(ReferenceRepoInterface):
    def __init__(self, store: DocumentStoreInterface):
        self.store = store

    async def _read(self, collection: str, doc_id: str) -> dict:
        data = await self.store.get(collection, doc_id)
        if data is None:
            raise EntityNotFoundError(ENTITY_NAMES.get(collection, collection), doc_id)
        return data

    async def append_id(self, collection: str, doc_id: str, field: str, ref_id: str, unique: bool = False) -> list[str]:
        data = await self._read(collection, doc_id)
        ids = list(data.get(field, []))
        if unique:
            # Set union that keeps the first insertion order
            ids = list(dict.fromkeys([*ids, ref_id]))
        else:
            ids.append(ref_id)
        data[field] = ids
        await self.store.set(collection, doc_id, data)
        return ids

    async def remove_id(self, collection: str, doc_id: str, field: str, ref_id: str, missing_ok: bool = False) -> list[str]:
        try:
            data = await self._read(collection, doc_id)
        except EntityNotFoundError:
            if not missing_ok:
                raise
            logger.warning(f"Skipped removing {ref_id} from {field}: {collection}:{doc_id} doesn't exist")
            return []
        ids = [existing_id for existing_id in data.get(field, []) if existing_id != ref_id]
        data[field] = ids
        await self.store.set(collection, doc_id, data)
        return ids

    async def delete_documents(self, collection: str, doc_ids: list[str]) -> None:
        await asyncio.gather(*(self.store.delete(collection, doc_id) for doc_id in doc_ids))
        logger.info(f"Deleted {len(doc_ids)} documents from {collection}")
