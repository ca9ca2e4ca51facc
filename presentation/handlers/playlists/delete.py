import logging
from aiohttp import web
from presentation.routers import router_playlists
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases
from infrastructure.services.repo_service import RepoService
from presentation.utils import client_of


logger = logging.getLogger('handlers')


@router_playlists.delete('/deletePlaylist/{playlist_id}')
async def delete_playlist(request: web.Request) -> web.Response:
    playlist_id = request.match_info['playlist_id']
    logger.info(f"DELETE PLAYLIST {playlist_id}", extra=client_of(request))

    repo_service: RepoService = request['repo_service']
    use_case = PlaylistUseCases(playlist_repo=repo_service.playlist_repo)
    await use_case.delete(playlist_id)
    return web.Response(status=204)
