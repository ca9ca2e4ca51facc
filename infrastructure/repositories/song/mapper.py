import asyncio
from app.domain.entities.song import Song, DBSong
from app.domain.repositories_interfaces.entity_mapper import EntityMapperInterface
from app.domain.repositories_interfaces.tag_repo import TagRepoInterface


class SongMapper(EntityMapperInterface[Song, DBSong]):
    def __init__(self, tag_repo: TagRepoInterface):
        self.tag_repo = tag_repo

    async def to_wire(self, entity: Song) -> DBSong:
        tag_ids = list(dict.fromkeys(tag.id for tag in entity.tags if tag.id))
        return DBSong(link=entity.link, tag_ids=tag_ids)

    async def from_wire(self, doc_id: str, wire: DBSong) -> Song:
        tags = await asyncio.gather(*(self.tag_repo.get_tag_by_id(tag_id) for tag_id in wire.tag_ids))
        # Tags that were removed from the store are dropped silently
        return Song(id=doc_id, link=wire.link, tags=[tag for tag in tags if tag is not None])
