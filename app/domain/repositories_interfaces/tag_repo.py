from app.domain.entities.tag import Tag
from abc import ABC, abstractmethod
from typing import Optional


class TagRepoInterface(ABC):
    @abstractmethod
    async def get_all_tags(self) -> list[Tag]:
        raise NotImplementedError

    @abstractmethod
    async def get_tag_by_id(self, tag_id: str) -> Optional[Tag]:
        raise NotImplementedError

    @abstractmethod
    async def create_tag(self, tag: Tag) -> Tag:
        raise NotImplementedError

    @abstractmethod
    async def update_tag(self, tag_id: str, tag: Tag) -> Tag:
        raise NotImplementedError
