import logging
from aiohttp import web
from presentation.routers import router_songs
from app.use_cases.songs.song_use_cases import SongUseCases
from infrastructure.services.repo_service import RepoService
from presentation.utils import client_of


logger = logging.getLogger('handlers')


@router_songs.delete('/deleteSong/{playlist_id}/{song_id}')
async def delete_song(request: web.Request) -> web.Response:
    playlist_id = request.match_info['playlist_id']
    song_id = request.match_info['song_id']
    logger.info(f"DELETE SONG {song_id}", extra=client_of(request))

    repo_service: RepoService = request['repo_service']
    use_case = SongUseCases(song_repo=repo_service.song_repo)
    await use_case.delete(playlist_id=playlist_id, song_id=song_id)
    return web.Response(status=204)
