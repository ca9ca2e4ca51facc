from typing import Optional
from app.domain.collections import TAGS
from app.domain.entities.tag import Tag, DBTag
from app.domain.repositories_interfaces.document_store import DocumentStoreInterface
from app.domain.repositories_interfaces.tag_repo import TagRepoInterface
from infrastructure.repositories.entity_repo import EntityRepository
from infrastructure.repositories.tag.mapper import TagMapper


class DocumentTagRepo(EntityRepository[Tag, DBTag], TagRepoInterface):
    def __init__(self, store: DocumentStoreInterface):
        super().__init__(store, TAGS, DBTag, TagMapper())

    async def get_all_tags(self) -> list[Tag]:
        return await self.read_all()

    async def get_tag_by_id(self, tag_id: str) -> Optional[Tag]:
        return await self.read(tag_id)

    async def create_tag(self, tag: Tag) -> Tag:
        return await self.create(tag)

    async def update_tag(self, tag_id: str, tag: Tag) -> Tag:
        return await self.update(tag_id, tag)
