from app.domain.entities.song import Song
from abc import ABC, abstractmethod
from typing import Optional


class SongRepoInterface(ABC):
    @abstractmethod
    async def get_all_songs(self) -> list[Song]:
        raise NotImplementedError

    @abstractmethod
    async def get_song_by_id(self, song_id: str) -> Optional[Song]:
        raise NotImplementedError

    @abstractmethod
    async def create_song(self, playlist_id: str, song: Song) -> Song:
        raise NotImplementedError

    @abstractmethod
    async def update_song(self, song_id: str, song: Song) -> Song:
        raise NotImplementedError

    @abstractmethod
    async def add_tag_to_song(self, song_id: str, tag_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def remove_tag_from_song(self, song_id: str, tag_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete_song(self, playlist_id: str, song_id: str) -> None:
        raise NotImplementedError
