import logging
from typing import Optional
from app.domain.collections import SONGS, PLAYLISTS, SONG_IDS_FIELD
from app.domain.entities.playlist import Playlist, DBPlaylist
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.repositories_interfaces.reference_repo import ReferenceRepoInterface
from app.domain.repositories_interfaces.song_repo import SongRepoInterface
from infrastructure.repositories.entity_repo import EntityRepository
from infrastructure.repositories.playlist.mapper import PlaylistMapper


logger = logging.getLogger('repositories')


class DocumentPlaylistRepo(EntityRepository[Playlist, DBPlaylist], PlaylistRepoInterface):
    def __init__(self, store: DocumentStoreInterface, song_repo: SongRepoInterface, reference_repo: ReferenceRepoInterface):
        super().__init__(store, PLAYLISTS, DBPlaylist, PlaylistMapper(song_repo))
        self.reference_repo = reference_repo

    async def get_all_playlists(self) -> list[Playlist]:
        return await self.read_all()

    async def get_playlist_by_id(self, playlist_id: str) -> Optional[Playlist]:
        return await self.read(playlist_id)

    async def create_playlist(self, playlist: Playlist) -> Playlist:
        # New playlists always start empty, songs are attached one by one afterwards
        return await self.create(playlist.model_copy(update={'songs': []}))

    async def update_playlist(self, playlist_id: str, playlist: Playlist) -> Playlist:
        return await self.update(playlist_id, playlist)

    async def add_song_to_playlist(self, playlist_id: str, song_id: str) -> None:
        await self.reference_repo.append_id(PLAYLISTS, playlist_id, SONG_IDS_FIELD, song_id)

    async def delete_song_from_playlist(self, playlist_id: str, song_id: str) -> None:
        await self.reference_repo.remove_id(PLAYLISTS, playlist_id, SONG_IDS_FIELD, song_id)

    async def delete_playlist(self, playlist_id: str) -> None:
        """
        Deletes every song of the playlist, then the playlist itself.

        Songs are deleted straight from the store rather than through the song repository,
        which would also try to detach each of them from this same playlist.
        Deleting a missing playlist does nothing.
        """
        wire = await self.db_read(playlist_id)
        if wire is None:
            logger.info(f"Playlist {playlist_id} is already deleted")
            return
        await self.reference_repo.delete_documents(SONGS, wire.song_ids)
        await self.delete(playlist_id)
