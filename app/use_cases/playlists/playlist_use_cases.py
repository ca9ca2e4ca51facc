import logging
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.entities.playlist import Playlist
from app.domain.exceptions import EntityNotFoundError


logger = logging.getLogger('use_cases')


class PlaylistUseCases:
    def __init__(self, playlist_repo: PlaylistRepoInterface):
        self.playlist_repo = playlist_repo

    async def get_all(self) -> list[Playlist]:
        """
        Retrieves every playlist with its songs and their tags.
        Songs that no longer exist are left out.

        :return: List of Playlist objects.
        """
        return await self.playlist_repo.get_all_playlists()

    async def get(self, playlist_id: str) -> Playlist:
        """
        Retrieves a playlist by its ID.

        :param playlist_id: The unique identifier for the playlist.
        :return: The retrieved Playlist object.
        :raises EntityNotFoundError: If the playlist doesn't exist.
        """
        playlist = await self.playlist_repo.get_playlist_by_id(playlist_id)
        if playlist is None:
            raise EntityNotFoundError('Playlist', playlist_id)
        return playlist

    async def create(self, name: str) -> Playlist:
        """
        Creates a new empty playlist.

        :param name: The name of the playlist.
        :return: The created Playlist object with its generated id.
        """
        playlist = await self.playlist_repo.create_playlist(Playlist(name=name))
        logger.info(f"Created playlist {playlist.id}")
        return playlist

    async def delete(self, playlist_id: str) -> None:
        """
        Deletes a playlist together with its songs.

        :param playlist_id: The unique identifier of the playlist to delete.
        """
        await self.playlist_repo.delete_playlist(playlist_id)
        logger.info(f"Deleted playlist {playlist_id}")
