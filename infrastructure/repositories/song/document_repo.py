import logging
from typing import Optional
from app.domain.collections import SONGS, PLAYLISTS, SONG_IDS_FIELD, TAG_IDS_FIELD
from app.domain.entities.song import Song, DBSong
from app.domain.exceptions import EntityNotFoundError
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from app.domain.repositories_interfaces.reference_repo import ReferenceRepoInterface
from app.domain.repositories_interfaces.song_repo import SongRepoInterface
from app.domain.repositories_interfaces.tag_repo import TagRepoInterface
from infrastructure.repositories.entity_repo import EntityRepository
from infrastructure.repositories.song.mapper import SongMapper


logger = logging.getLogger('repositories')


class DocumentSongRepo(EntityRepository[Song, DBSong], SongRepoInterface):
    def __init__(self, store: DocumentStoreInterface, tag_repo: TagRepoInterface, reference_repo: ReferenceRepoInterface):
        super().__init__(store, SONGS, DBSong, SongMapper(tag_repo))
        self.reference_repo = reference_repo

    async def get_all_songs(self) -> list[Song]:
        return await self.read_all()

    async def get_song_by_id(self, song_id: str) -> Optional[Song]:
        return await self.read(song_id)

    async def create_song(self, playlist_id: str, song: Song) -> Song:
        """
        Creates the song and appends its id to the playlist.

        The two writes are independent: when the playlist doesn't exist the error is raised
        after the song document was already stored, and the song is left without a playlist.

        :param playlist_id: The ID of the playlist the song is added to.
        :param song: The song to create.
        :return: The created Song with its generated id.
        :raises EntityNotFoundError: If the playlist doesn't exist.
        """
        created = await self.create(song)
        try:
            await self.reference_repo.append_id(PLAYLISTS, playlist_id, SONG_IDS_FIELD, created.id)
        except EntityNotFoundError:
            logger.warning(f"Song {created.id} was stored but playlist {playlist_id} doesn't exist")
            raise
        return created

    async def update_song(self, song_id: str, song: Song) -> Song:
        return await self.update(song_id, song)

    async def add_tag_to_song(self, song_id: str, tag_id: str) -> None:
        await self.reference_repo.append_id(SONGS, song_id, TAG_IDS_FIELD, tag_id, unique=True)

    async def remove_tag_from_song(self, song_id: str, tag_id: str) -> None:
        await self.reference_repo.remove_id(SONGS, song_id, TAG_IDS_FIELD, tag_id)

    async def delete_song(self, playlist_id: str, song_id: str) -> None:
        """
        Deletes the song and removes its id from the playlist.
        The playlist is allowed to be missing. There is no compensation if the second write fails.
        """
        await self.delete(song_id)
        await self.reference_repo.remove_id(PLAYLISTS, playlist_id, SONG_IDS_FIELD, song_id, missing_ok=True)
