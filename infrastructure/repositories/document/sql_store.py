import json
import logging
from typing import Optional
from infrastructure.aiomysql_config import MySQLPool
from infrastructure.utils import generate_document_id
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from app.domain.collections import SONGS, PLAYLISTS, TAGS


logger = logging.getLogger('storage')


class MySQLDocumentStore(DocumentStoreInterface):
    """
    One table per collection with the document kept in a JSON column.
    Table names can't be passed as query parameters, so only known collections are accepted.
    """

    def __init__(self, pool: MySQLPool, collections: tuple = (SONGS, PLAYLISTS, TAGS)):
        self.pool = pool
        self.collections = collections

    def _table(self, collection: str) -> str:
        if collection not in self.collections:
            raise ValueError(f"Unknown collection: {collection}")
        return collection

    async def create_tables(self) -> None:
        tables = [self._table(collection) for collection in self.collections]
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cursor:
                for table in tables:
                    await cursor.execute(
                        f'''CREATE TABLE IF NOT EXISTS `{table}` (
                            id VARCHAR(32) PRIMARY KEY,
                            data JSON NOT NULL,
                            created_at TIMESTAMP(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6)
                        )'''
                    )
            await conn.commit()
        logger.info(f"Ensured tables for collections: {', '.join(tables)}")

    async def get(self, collection: str, doc_id: str) -> Optional[dict]:
        table = self._table(collection)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute(f"SELECT data FROM `{table}` WHERE id=%s", (doc_id,))
                result = await cursor.fetchone()
                if result:
                    return json.loads(result[0])
                return None

    async def get_all(self, collection: str) -> list[tuple[str, dict]]:
        table = self._table(collection)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute(f"SELECT id, data FROM `{table}` ORDER BY created_at")
                result = await cursor.fetchall()
                return [(row[0], json.loads(row[1])) for row in result]

    async def add(self, collection: str, data: dict) -> str:
        doc_id = generate_document_id()
        await self.set(collection, doc_id, data)
        logger.info(f"Added document {collection}:{doc_id}")
        return doc_id

    async def set(self, collection: str, doc_id: str, data: dict) -> None:
        table = self._table(collection)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute(
                    f'''INSERT INTO `{table}` (id, data) VALUES (%s, %s)
                        ON DUPLICATE KEY UPDATE data=VALUES(data)''',
                    (doc_id, json.dumps(data))
                )
            await conn.commit()

    async def delete(self, collection: str, doc_id: str) -> None:
        table = self._table(collection)
        async with self.pool.acquire() as conn:
            async with conn.cursor() as cursor:
                await cursor.execute(f"DELETE FROM `{table}` WHERE id=%s", (doc_id,))
            await conn.commit()
