from app.domain.entities.playlist import Playlist
from abc import ABC, abstractmethod
from typing import Optional


class PlaylistRepoInterface(ABC):
    @abstractmethod
    async def get_all_playlists(self) -> list[Playlist]:
        raise NotImplementedError

    @abstractmethod
    async def get_playlist_by_id(self, playlist_id: str) -> Optional[Playlist]:
        raise NotImplementedError

    @abstractmethod
    async def create_playlist(self, playlist: Playlist) -> Playlist:
        raise NotImplementedError

    @abstractmethod
    async def update_playlist(self, playlist_id: str, playlist: Playlist) -> Playlist:
        raise NotImplementedError

    @abstractmethod
    async def add_song_to_playlist(self, playlist_id: str, song_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete_song_from_playlist(self, playlist_id: str, song_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete_playlist(self, playlist_id: str) -> None:
        raise NotImplementedError
