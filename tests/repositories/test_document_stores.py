import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.repositories.document.memory_store import InMemoryDocumentStore
from infrastructure.repositories.document.redis_store import RedisDocumentStore
from infrastructure.repositories.document.sql_store import MySQLDocumentStore


class TestInMemoryDocumentStore:
    @pytest.mark.asyncio
    async def test_returned_documents_are_copies(self):
        store = InMemoryDocumentStore()
        doc_id = await store.add('songs', {'link': "a", 'tagIds': []})

        data = await store.get('songs', doc_id)
        data['tagIds'].append("t1")

        assert await store.get('songs', doc_id) == {'link': "a", 'tagIds': []}

    @pytest.mark.asyncio
    async def test_get_all_in_creation_order(self):
        store = InMemoryDocumentStore()
        first = await store.add('tags', {'name': "A"})
        second = await store.add('tags', {'name': "B"})

        assert await store.get_all('tags') == [(first, {'name': "A"}), (second, {'name': "B"})]

    @pytest.mark.asyncio
    async def test_missing_collection(self):
        store = InMemoryDocumentStore()

        assert await store.get('tags', "missing") is None
        assert await store.get_all('tags') == []
        await store.delete('tags', "missing")


@pytest.fixture
def redis_conn():
    conn = MagicMock()
    conn.__aenter__.return_value = conn
    pipe = MagicMock()
    pipe.__aenter__.return_value = pipe
    pipe.set.return_value = pipe
    pipe.zadd.return_value = pipe
    pipe.delete.return_value = pipe
    pipe.zrem.return_value = pipe
    pipe.execute = AsyncMock()
    conn.pipeline.return_value = pipe
    return conn


@pytest.fixture
def redis_store(redis_conn):
    redis_pool = MagicMock()
    redis_pool.get_connection = AsyncMock(return_value=redis_conn)
    return RedisDocumentStore(redis_pool)


class TestRedisDocumentStore:
    @pytest.mark.asyncio
    async def test_get(self, redis_store, redis_conn):
        redis_conn.get = AsyncMock(return_value=b'{"name": "Chill", "tagColor": "#00ff00"}')

        assert await redis_store.get('tags', "t1") == {'name': "Chill", 'tagColor': "#00ff00"}
        redis_conn.get.assert_called_once_with('tags:t1')

    @pytest.mark.asyncio
    async def test_get_missing(self, redis_store, redis_conn):
        redis_conn.get = AsyncMock(return_value=None)

        assert await redis_store.get('tags', "t1") is None

    @pytest.mark.asyncio
    async def test_get_all_skips_vanished_documents(self, redis_store, redis_conn):
        redis_conn.zrange = AsyncMock(return_value=[b"t1", b"t2"])
        redis_conn.mget = AsyncMock(return_value=[b'{"name": "A", "tagColor": "red"}', None])

        assert await redis_store.get_all('tags') == [("t1", {'name': "A", 'tagColor': "red"})]
        redis_conn.mget.assert_called_once_with(['tags:t1', 'tags:t2'])

    @pytest.mark.asyncio
    async def test_get_all_empty_collection(self, redis_store, redis_conn):
        redis_conn.zrange = AsyncMock(return_value=[])
        redis_conn.mget = AsyncMock()

        assert await redis_store.get_all('tags') == []
        redis_conn.mget.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_writes_document_and_index(self, redis_store, redis_conn):
        doc_id = await redis_store.add('tags', {'name': "A", 'tagColor': "red"})

        pipe = redis_conn.pipeline.return_value
        pipe.set.assert_called_once_with(f'tags:{doc_id}', json.dumps({'name': "A", 'tagColor': "red"}))
        args, kwargs = pipe.zadd.call_args
        assert args[0] == 'tags'
        assert doc_id in args[1]
        assert kwargs == {'nx': True}
        pipe.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_removes_document_and_index(self, redis_store, redis_conn):
        await redis_store.delete('tags', "t1")

        pipe = redis_conn.pipeline.return_value
        pipe.delete.assert_called_once_with('tags:t1')
        pipe.zrem.assert_called_once_with('tags', "t1")
        pipe.execute.assert_awaited_once()


@pytest.fixture
def mysql_cursor():
    cursor = MagicMock()
    cursor.execute = AsyncMock()
    return cursor


@pytest.fixture
def mysql_conn(mysql_cursor):
    conn = MagicMock()
    conn.cursor.return_value.__aenter__.return_value = mysql_cursor
    conn.commit = AsyncMock()
    return conn


@pytest.fixture
def mysql_store(mysql_conn):
    pool = MagicMock()
    pool.acquire.return_value.__aenter__.return_value = mysql_conn
    return MySQLDocumentStore(pool)


class TestMySQLDocumentStore:
    @pytest.mark.asyncio
    async def test_get(self, mysql_store, mysql_cursor):
        mysql_cursor.fetchone = AsyncMock(return_value=('{"link": "a", "tagIds": []}',))

        assert await mysql_store.get('songs', "s1") == {'link': "a", 'tagIds': []}
        query, params = mysql_cursor.execute.call_args[0]
        assert "FROM `songs`" in query
        assert params == ("s1",)

    @pytest.mark.asyncio
    async def test_get_missing(self, mysql_store, mysql_cursor):
        mysql_cursor.fetchone = AsyncMock(return_value=None)

        assert await mysql_store.get('songs', "s1") is None

    @pytest.mark.asyncio
    async def test_get_all(self, mysql_store, mysql_cursor):
        mysql_cursor.fetchall = AsyncMock(return_value=[("s1", '{"link": "a", "tagIds": []}')])

        assert await mysql_store.get_all('songs') == [("s1", {'link': "a", 'tagIds': []})]

    @pytest.mark.asyncio
    async def test_set_upserts_and_commits(self, mysql_store, mysql_cursor, mysql_conn):
        await mysql_store.set('playlists', "p1", {'name': "Road Trip", 'songIds': []})

        query, params = mysql_cursor.execute.call_args[0]
        assert "ON DUPLICATE KEY UPDATE" in query
        assert params == ("p1", json.dumps({'name': "Road Trip", 'songIds': []}))
        mysql_conn.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_tables(self, mysql_store, mysql_cursor):
        await mysql_store.create_tables()

        assert mysql_cursor.execute.await_count == 3

    @pytest.mark.asyncio
    async def test_unknown_collection_is_rejected(self, mysql_store):
        with pytest.raises(ValueError):
            await mysql_store.get('users; DROP TABLE songs', "s1")
