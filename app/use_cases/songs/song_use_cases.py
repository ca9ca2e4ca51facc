import logging
from app.domain.repositories_interfaces.song_repo import SongRepoInterface
from app.domain.entities.song import Song
from app.domain.exceptions import EntityNotFoundError


logger = logging.getLogger('use_cases')


class SongUseCases:
    def __init__(self, song_repo: SongRepoInterface):
        self.song_repo = song_repo

    async def get_all(self) -> list[Song]:
        """
        Retrieves every song with its tags.

        :return: List of Song objects.
        """
        return await self.song_repo.get_all_songs()

    async def get(self, song_id: str) -> Song:
        """
        Retrieves a song with its tags.

        :param song_id: The ID of the song to be retrieved.
        :return: The retrieved Song object.
        :raises EntityNotFoundError: If the song doesn't exist.
        """
        song = await self.song_repo.get_song_by_id(song_id)
        if song is None:
            raise EntityNotFoundError('Song', song_id)
        return song

    async def add(self, link: str, playlist_id: str) -> Song:
        """
        Creates a song without tags and adds it to the playlist.

        :param link: Link to the song.
        :param playlist_id: The ID of the playlist to which the song will be added.
        :return: The created Song object.
        :raises EntityNotFoundError: If the playlist doesn't exist.
        """
        song = await self.song_repo.create_song(playlist_id, Song(link=link))
        logger.info(f"Added song {song.id} to playlist {playlist_id}")
        return song

    async def tag(self, song_id: str, tag_id: str) -> Song:
        """
        Attaches the tag to the song. Attaching a tag twice keeps a single occurrence.

        :param song_id: The ID of the song to be tagged.
        :param tag_id: The ID of the tag.
        :return: The updated Song object with its tags resolved.
        :raises EntityNotFoundError: If the song doesn't exist.
        """
        await self.song_repo.add_tag_to_song(song_id, tag_id)
        logger.info(f"Tagged song {song_id} with {tag_id}")
        return await self.get(song_id)

    async def untag(self, song_id: str, tag_id: str) -> None:
        """
        Detaches the tag from the song. The tag itself is kept.

        :param song_id: The ID of the song.
        :param tag_id: The ID of the tag to detach.
        :raises EntityNotFoundError: If the song doesn't exist.
        """
        await self.song_repo.remove_tag_from_song(song_id, tag_id)
        logger.info(f"Removed tag {tag_id} from song {song_id}")

    async def delete(self, playlist_id: str, song_id: str) -> None:
        """
        Deletes the song and removes it from the playlist.

        :param playlist_id: The ID of the playlist from which the song will be removed.
        :param song_id: The ID of the song to be deleted.
        """
        await self.song_repo.delete_song(playlist_id, song_id)
        logger.info(f"Deleted song {song_id} from playlist {playlist_id}")
