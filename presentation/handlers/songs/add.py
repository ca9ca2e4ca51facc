import logging
from aiohttp import web
from presentation.routers import router_songs
from app.use_cases.songs.song_use_cases import SongUseCases
from infrastructure.services.repo_service import RepoService
from presentation.request_models import AddSongRequest
from presentation.utils import parse_body, json_response, client_of


logger = logging.getLogger('handlers')


@router_songs.post('/addSong')
async def add_song(request: web.Request) -> web.Response:
    body = await parse_body(request, AddSongRequest)
    logger.info(f"ADD SONG TO PLAYLIST {body.playlist_id}", extra=client_of(request))

    repo_service: RepoService = request['repo_service']
    use_case = SongUseCases(song_repo=repo_service.song_repo)
    song = await use_case.add(link=body.link, playlist_id=body.playlist_id)
    return json_response(song, status=201)
