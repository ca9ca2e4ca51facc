import pytest

from app.domain.entities.tag import Tag


class TestTagRepo:
    @pytest.mark.asyncio
    async def test_create_and_get(self, tag_repo):
        tag = await tag_repo.create_tag(Tag(name="Chill", tag_color="#00ff00"))

        assert await tag_repo.get_tag_by_id(tag.id) == tag
        assert await tag_repo.get_all_tags() == [tag]

    @pytest.mark.asyncio
    async def test_color_is_not_validated(self, tag_repo):
        tag = await tag_repo.create_tag(Tag(name="Odd", tag_color="not-a-color"))

        assert (await tag_repo.get_tag_by_id(tag.id)).tag_color == "not-a-color"

    @pytest.mark.asyncio
    async def test_update_tag(self, tag_repo):
        tag = await tag_repo.create_tag(Tag(name="Chill", tag_color="#00ff00"))

        await tag_repo.update_tag(tag.id, Tag(name="Calm", tag_color="#0000ff"))

        assert await tag_repo.get_tag_by_id(tag.id) == Tag(id=tag.id, name="Calm", tag_color="#0000ff")

    @pytest.mark.asyncio
    async def test_missing_tag(self, tag_repo):
        assert await tag_repo.get_tag_by_id("missing") is None
