from pydantic import BaseModel, ConfigDict, Field


"""
Bodies of the POST and PUT endpoints. Fields are serialized in camelCase.
Every string field is required and must not be empty.
"""

class AddPlaylistRequest(BaseModel):
    name: str = Field(min_length=1)


class AddSongRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    link: str = Field(min_length=1)
    playlist_id: str = Field(alias='playlistId', min_length=1)


class TagRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    tag_color: str = Field(alias='tagColor', min_length=1)


class TagSongRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    song_id: str = Field(alias='songId', min_length=1)
    tag_id: str = Field(alias='tagId', min_length=1)
