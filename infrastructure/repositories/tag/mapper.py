from app.domain.entities.tag import Tag, DBTag
from app.domain.repositories_interfaces.entity_mapper import EntityMapperInterface


class TagMapper(EntityMapperInterface[Tag, DBTag]):
    # Tags reference nothing, so conversion only moves the id in and out
    async def to_wire(self, entity: Tag) -> DBTag:
        return DBTag(name=entity.name, tag_color=entity.tag_color)

    async def from_wire(self, doc_id: str, wire: DBTag) -> Tag:
        return Tag(id=doc_id, name=wire.name, tag_color=wire.tag_color)
