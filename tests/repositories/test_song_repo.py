import pytest

from app.domain.entities.playlist import Playlist
from app.domain.entities.song import Song
from app.domain.entities.tag import Tag
from app.domain.exceptions import EntityNotFoundError


@pytest.fixture
async def playlist(playlist_repo):
    return await playlist_repo.create_playlist(Playlist(name="Road Trip"))


@pytest.fixture
async def tag(tag_repo):
    return await tag_repo.create_tag(Tag(name="Chill", tag_color="#00ff00"))


class TestSongRepo:
    @pytest.mark.asyncio
    async def test_create_then_read_round_trip(self, song_repo, playlist):
        created = await song_repo.create_song(playlist.id, Song(link="http://x/a"))

        song = await song_repo.get_song_by_id(created.id)

        assert song.link == "http://x/a"
        assert song.tags == []

    @pytest.mark.asyncio
    async def test_create_appends_to_playlist(self, song_repo, playlist_repo, playlist):
        first = await song_repo.create_song(playlist.id, Song(link="http://x/a"))
        second = await song_repo.create_song(playlist.id, Song(link="http://x/b"))

        wire = await playlist_repo.db_read(playlist.id)

        assert wire.song_ids == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_create_with_missing_playlist_leaves_orphan(self, song_repo, playlist_repo):
        with pytest.raises(EntityNotFoundError):
            await song_repo.create_song("missing", Song(link="http://x/a"))

        # The song was stored before the playlist lookup failed
        songs = await song_repo.get_all_songs()
        assert [song.link for song in songs] == ["http://x/a"]
        assert await playlist_repo.get_all_playlists() == []

    @pytest.mark.asyncio
    async def test_add_tag_twice_keeps_one_occurrence(self, song_repo, playlist, tag):
        song = await song_repo.create_song(playlist.id, Song(link="http://x/a"))

        await song_repo.add_tag_to_song(song.id, tag.id)
        await song_repo.add_tag_to_song(song.id, tag.id)

        tagged = await song_repo.get_song_by_id(song.id)
        assert tagged.tags == [tag]

    @pytest.mark.asyncio
    async def test_add_tag_to_missing_song(self, song_repo, tag):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await song_repo.add_tag_to_song("missing", tag.id)

        assert str(exc_info.value) == "Song not found"

    @pytest.mark.asyncio
    async def test_remove_tag(self, song_repo, tag_repo, playlist, tag):
        other = await tag_repo.create_tag(Tag(name="Loud", tag_color="red"))
        song = await song_repo.create_song(playlist.id, Song(link="http://x/a"))
        await song_repo.add_tag_to_song(song.id, tag.id)
        await song_repo.add_tag_to_song(song.id, other.id)

        await song_repo.remove_tag_from_song(song.id, tag.id)
        await song_repo.remove_tag_from_song(song.id, "never-attached")

        assert (await song_repo.get_song_by_id(song.id)).tags == [other]
        # Tags are only detached, never deleted
        assert await tag_repo.get_tag_by_id(tag.id) == tag

    @pytest.mark.asyncio
    async def test_remove_tag_from_missing_song(self, song_repo, tag):
        with pytest.raises(EntityNotFoundError):
            await song_repo.remove_tag_from_song("missing", tag.id)

    @pytest.mark.asyncio
    async def test_dangling_tag_is_dropped(self, song_repo, store, playlist, tag):
        song = await song_repo.create_song(playlist.id, Song(link="http://x/a"))
        await song_repo.add_tag_to_song(song.id, tag.id)
        await song_repo.add_tag_to_song(song.id, "gone")

        hydrated = await song_repo.get_song_by_id(song.id)

        assert hydrated.tags == [tag]
        assert (await song_repo.db_read(song.id)).tag_ids == [tag.id, "gone"]

    @pytest.mark.asyncio
    async def test_delete_song_detaches_from_playlist(self, song_repo, playlist_repo, playlist):
        kept = await song_repo.create_song(playlist.id, Song(link="http://x/a"))
        deleted = await song_repo.create_song(playlist.id, Song(link="http://x/b"))

        await song_repo.delete_song(playlist.id, deleted.id)

        assert await song_repo.get_song_by_id(deleted.id) is None
        assert (await playlist_repo.db_read(playlist.id)).song_ids == [kept.id]

    @pytest.mark.asyncio
    async def test_delete_song_with_missing_playlist(self, song_repo, playlist):
        song = await song_repo.create_song(playlist.id, Song(link="http://x/a"))

        await song_repo.delete_song("missing", song.id)

        assert await song_repo.get_song_by_id(song.id) is None

    @pytest.mark.asyncio
    async def test_update_song_stores_tag_ids(self, song_repo, playlist, tag):
        song = await song_repo.create_song(playlist.id, Song(link="http://x/a"))

        await song_repo.update_song(song.id, Song(link="http://x/new", tags=[tag, tag]))

        wire = await song_repo.db_read(song.id)
        assert wire.link == "http://x/new"
        assert wire.tag_ids == [tag.id]
