import logging
from aiohttp import web
from presentation.routers import router_songs
from app.use_cases.songs.song_use_cases import SongUseCases
from infrastructure.services.repo_service import RepoService
from presentation.request_models import TagSongRequest
from presentation.utils import parse_body, json_response, client_of


logger = logging.getLogger('handlers')


@router_songs.post('/tagSong')
async def tag_song(request: web.Request) -> web.Response:
    body = await parse_body(request, TagSongRequest)
    logger.info(f"TAG SONG {body.song_id}", extra=client_of(request))

    repo_service: RepoService = request['repo_service']
    use_case = SongUseCases(song_repo=repo_service.song_repo)
    song = await use_case.tag(song_id=body.song_id, tag_id=body.tag_id)
    return json_response(song)


# Detaches the tag from the song, the tag itself is never deleted
@router_songs.delete('/deleteTag/{song_id}/{tag_id}')
async def untag_song(request: web.Request) -> web.Response:
    song_id = request.match_info['song_id']
    logger.info(f"UNTAG SONG {song_id}", extra=client_of(request))

    repo_service: RepoService = request['repo_service']
    use_case = SongUseCases(song_repo=repo_service.song_repo)
    await use_case.untag(song_id=song_id, tag_id=request.match_info['tag_id'])
    return web.Response(status=204)
