from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from app.domain.entities.tag import Tag


"""
Song Entity:
1. id (str, None): Unique identifier for the song. Assigned by the document store on creation.
2. link (str): Link to the song.
3. tags (list[Tag]): Tags attached to the song, resolved from the stored tag ids.
"""
class Song(BaseModel):
    id: Optional[str] = None
    link: str
    tags: list[Tag] = []


"""
DBSong is the stored (wire) form of the song.
tag_ids (serialized as tagIds) behaves as a set: every id appears at most once.
"""
class DBSong(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    link: str
    tag_ids: list[str] = Field(default=[], alias='tagIds')
