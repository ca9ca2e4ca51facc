import json
import logging
import time
from typing import Optional
from infrastructure.redis_config import RedisPool
from infrastructure.utils import generate_document_id
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface


logger = logging.getLogger('storage')


def _decode(value) -> str:
    return value.decode() if isinstance(value, bytes) else value


class RedisDocumentStore(DocumentStoreInterface):
    """
    Every document is a JSON string under '<collection>:<id>'. The ids of a collection are kept
    in a sorted set named after the collection, scored by creation time, so get_all can list
    the collection in creation order without scanning the keyspace.
    """

    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def get(self, collection: str, doc_id: str) -> Optional[dict]:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.get(f'{collection}:{doc_id}')
            if data:
                return json.loads(data)
            return None

    async def get_all(self, collection: str) -> list[tuple[str, dict]]:
        async with await self.redis_pool.get_connection() as conn:
            doc_ids = [_decode(doc_id) for doc_id in await conn.zrange(collection, 0, -1)]
            if not doc_ids:
                return []
            values = await conn.mget([f'{collection}:{doc_id}' for doc_id in doc_ids])
            # A document deleted between the two calls comes back as None
            return [(doc_id, json.loads(value)) for doc_id, value in zip(doc_ids, values) if value]

    async def add(self, collection: str, data: dict) -> str:
        doc_id = generate_document_id()
        await self.set(collection, doc_id, data)
        logger.info(f"Added document {collection}:{doc_id}")
        return doc_id

    async def set(self, collection: str, doc_id: str, data: dict) -> None:
        async with await self.redis_pool.get_connection() as conn:
            async with conn.pipeline(transaction=True) as pipe:
                # nx keeps the original creation score when an existing document is overwritten
                await (
                    pipe.set(f'{collection}:{doc_id}', json.dumps(data))
                    .zadd(collection, {doc_id: time.time()}, nx=True)
                    .execute()
                )

    async def delete(self, collection: str, doc_id: str) -> None:
        async with await self.redis_pool.get_connection() as conn:
            async with conn.pipeline(transaction=True) as pipe:
                await pipe.delete(f'{collection}:{doc_id}').zrem(collection, doc_id).execute()
