import asyncio
from app.domain.entities.playlist import Playlist, DBPlaylist
from app.domain.repositories_interfaces.entity_mapper import EntityMapperInterface
from app.domain.repositories_interfaces.song_repo import SongRepoInterface


class PlaylistMapper(EntityMapperInterface[Playlist, DBPlaylist]):
    def __init__(self, song_repo: SongRepoInterface):
        self.song_repo = song_repo

    async def to_wire(self, entity: Playlist) -> DBPlaylist:
        return DBPlaylist(name=entity.name, song_ids=[song.id for song in entity.songs if song.id])

    async def from_wire(self, doc_id: str, wire: DBPlaylist) -> Playlist:
        # Each song resolves its own tags, so the playlist is hydrated two levels deep
        songs = await asyncio.gather(*(self.song_repo.get_song_by_id(song_id) for song_id in wire.song_ids))
        return Playlist(id=doc_id, name=wire.name, songs=[song for song in songs if song is not None])
