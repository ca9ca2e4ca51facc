from aiohttp import web
from presentation.routers import router_playlists
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases
from infrastructure.services.repo_service import RepoService
from presentation.utils import json_response


@router_playlists.get('/getPlaylists')
async def get_playlists(request: web.Request) -> web.Response:
    repo_service: RepoService = request['repo_service']
    use_case = PlaylistUseCases(playlist_repo=repo_service.playlist_repo)
    return json_response(await use_case.get_all())


@router_playlists.get('/getPlaylist/{playlist_id}')
async def get_playlist(request: web.Request) -> web.Response:
    repo_service: RepoService = request['repo_service']
    use_case = PlaylistUseCases(playlist_repo=repo_service.playlist_repo)
    return json_response(await use_case.get(request.match_info['playlist_id']))
