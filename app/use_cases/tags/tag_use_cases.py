import logging
from app.domain.repositories_interfaces.tag_repo import TagRepoInterface
from app.domain.entities.tag import Tag
from app.domain.exceptions import EntityNotFoundError


logger = logging.getLogger('use_cases')


class TagUseCases:
    def __init__(self, tag_repo: TagRepoInterface):
        self.tag_repo = tag_repo

    async def get_all(self) -> list[Tag]:
        return await self.tag_repo.get_all_tags()

    async def get(self, tag_id: str) -> Tag:
        tag = await self.tag_repo.get_tag_by_id(tag_id)
        if tag is None:
            raise EntityNotFoundError('Tag', tag_id)
        return tag

    async def create(self, name: str, tag_color: str) -> Tag:
        tag = await self.tag_repo.create_tag(Tag(name=name, tag_color=tag_color))
        logger.info(f"Created tag {tag.id}")
        return tag

    async def update(self, tag_id: str, name: str, tag_color: str) -> Tag:
        """
        Renames or recolors an existing tag. Songs pick up the change on their next read.

        :raises EntityNotFoundError: If the tag doesn't exist.
        """
        # The store would create a missing tag on update, so existence is checked first
        await self.get(tag_id)
        tag = await self.tag_repo.update_tag(tag_id, Tag(name=name, tag_color=tag_color))
        logger.info(f"Updated tag {tag_id}")
        return tag
