from aiohttp import web
from presentation.routers import router_songs
from app.use_cases.songs.song_use_cases import SongUseCases
from infrastructure.services.repo_service import RepoService
from presentation.utils import json_response


@router_songs.get('/getSongs')
async def get_songs(request: web.Request) -> web.Response:
    repo_service: RepoService = request['repo_service']
    use_case = SongUseCases(song_repo=repo_service.song_repo)
    return json_response(await use_case.get_all())


@router_songs.get('/getSong/{song_id}')
async def get_song(request: web.Request) -> web.Response:
    repo_service: RepoService = request['repo_service']
    use_case = SongUseCases(song_repo=repo_service.song_repo)
    return json_response(await use_case.get(request.match_info['song_id']))
