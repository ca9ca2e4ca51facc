import pytest
from aiohttp import test_utils

from infrastructure.repositories.document.memory_store import InMemoryDocumentStore
from infrastructure.services.repo_service import RepoService
from presentation.web_app import create_app


@pytest.fixture
def store():
    """Provide an empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def repo_service(store):
    """Provide repositories wired over the in-memory store."""
    return RepoService.from_store(store)


@pytest.fixture
def song_repo(repo_service):
    return repo_service.song_repo


@pytest.fixture
def playlist_repo(repo_service):
    return repo_service.playlist_repo


@pytest.fixture
def tag_repo(repo_service):
    return repo_service.tag_repo


@pytest.fixture
async def client(repo_service):
    """Provide an HTTP client for the app running on a test server."""
    async with test_utils.TestClient(test_utils.TestServer(create_app(repo_service))) as client:
        yield client
