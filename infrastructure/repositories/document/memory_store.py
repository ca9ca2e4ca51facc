from copy import deepcopy
from typing import Optional
import logging
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from infrastructure.utils import generate_document_id


logger = logging.getLogger('storage')


class InMemoryDocumentStore(DocumentStoreInterface):
    """
    Process-local store for development and tests. Documents are copied on the way in and out
    so callers can't mutate stored state through returned dicts.
    """

    def __init__(self):
        self.collections: dict[str, dict[str, dict]] = {}

    async def get(self, collection: str, doc_id: str) -> Optional[dict]:
        data = self.collections.get(collection, {}).get(doc_id)
        return deepcopy(data) if data is not None else None

    async def get_all(self, collection: str) -> list[tuple[str, dict]]:
        # dicts keep insertion order, so documents come back in creation order
        return [(doc_id, deepcopy(data)) for doc_id, data in self.collections.get(collection, {}).items()]

    async def add(self, collection: str, data: dict) -> str:
        doc_id = generate_document_id()
        await self.set(collection, doc_id, data)
        logger.debug(f"Added {collection}:{doc_id}")
        return doc_id

    async def set(self, collection: str, doc_id: str, data: dict) -> None:
        self.collections.setdefault(collection, {})[doc_id] = deepcopy(data)

    async def delete(self, collection: str, doc_id: str) -> None:
        self.collections.get(collection, {}).pop(doc_id, None)
