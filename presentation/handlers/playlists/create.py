import logging
from aiohttp import web
from presentation.routers import router_playlists
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases
from infrastructure.services.repo_service import RepoService
from presentation.request_models import AddPlaylistRequest
from presentation.utils import parse_body, json_response, client_of


logger = logging.getLogger('handlers')


@router_playlists.post('/addPlaylist')
async def create_playlist(request: web.Request) -> web.Response:
    body = await parse_body(request, AddPlaylistRequest)
    logger.info("CREATE PLAYLIST", extra=client_of(request))

    repo_service: RepoService = request['repo_service']
    use_case = PlaylistUseCases(playlist_repo=repo_service.playlist_repo)
    playlist = await use_case.create(name=body.name)
    return json_response(playlist, status=201)
