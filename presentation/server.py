import asyncio
import logging
from aiohttp import web
from config import logging_config # Importing config to apply it
from config.main_config import (DOCUMENT_STORE, REDIS_HOST, REDIS_PORT, REDIS_DB,
                                DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME, HOST, PORT)
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from infrastructure.aiomysql_config import MySQLPool
from infrastructure.redis_config import RedisPool
from infrastructure.repositories.document.memory_store import InMemoryDocumentStore
from infrastructure.repositories.document.redis_store import RedisDocumentStore
from infrastructure.repositories.document.sql_store import MySQLDocumentStore
from infrastructure.services.repo_service import RepoService
from presentation.web_app import create_app


logger = logging.getLogger(__name__)


async def create_store(backend: str) -> tuple[DocumentStoreInterface, RedisPool | MySQLPool | None]:
    """
    Creates the document store selected in config together with its connection pool.

    :param backend: 'memory', 'redis' or 'mysql'.
    :return: The store and the pool to close on shutdown, None for the in-memory store.
    """
    if backend == 'memory':
        return InMemoryDocumentStore(), None
    if backend == 'redis':
        redis_pool = RedisPool(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB)
        await redis_pool.create_pool()
        return RedisDocumentStore(redis_pool), redis_pool
    if backend == 'mysql':
        sql_pool = MySQLPool(host=DB_HOST, port=DB_PORT, user=DB_USER, password=DB_PASSWORD, db=DB_NAME)
        await sql_pool.create_pool()
        store = MySQLDocumentStore(sql_pool)
        await store.create_tables()
        return store, sql_pool
    raise ValueError(f"Unknown document store: {backend}")


async def main():
    store, pool = await create_store(DOCUMENT_STORE)
    repo_service = RepoService.from_store(store)
    app = create_app(repo_service)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, HOST, PORT)
    await site.start()
    logger.info(f"Backend listening on port: {PORT} ({DOCUMENT_STORE} store)")
    try:
        # Serve until the task is cancelled
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        if pool is not None:
            await pool.close_pool()


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Backend stopped")


if __name__ == '__main__':
    run()
