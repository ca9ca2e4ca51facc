from aiohttp import web
from infrastructure.services.repo_service import RepoService


def repo_middleware(repo_service: RepoService):
    """
    Makes the repositories available to every handler as request['repo_service'].
    """
    @web.middleware
    async def middleware(request: web.Request, handler):
        request['repo_service'] = repo_service
        return await handler(request)
    return middleware
