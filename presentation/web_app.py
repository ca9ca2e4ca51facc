from aiohttp import web
from infrastructure.services.repo_service import RepoService
from presentation.middlewares.logging_middleware import logging_middleware
from presentation.middlewares.error_middleware import error_middleware
from presentation.middlewares.repo_middleware import repo_middleware
from presentation.routers import router_songs, router_playlists, router_tags
# Importing handlers modules to register them in routers
import presentation.handlers.songs.get
import presentation.handlers.songs.add
import presentation.handlers.songs.tag
import presentation.handlers.songs.delete
import presentation.handlers.playlists.get
import presentation.handlers.playlists.create
import presentation.handlers.playlists.delete
import presentation.handlers.tags.get
import presentation.handlers.tags.create
import presentation.handlers.tags.update


def create_app(repo_service: RepoService) -> web.Application:
    # The first middleware is the outermost one, so the request log sees the final status
    app = web.Application(middlewares=[
        logging_middleware,
        error_middleware,
        repo_middleware(repo_service),
    ])
    for router in (router_songs, router_playlists, router_tags):
        app.add_routes(router)
    return app
