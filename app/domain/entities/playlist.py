from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from app.domain.entities.song import Song

"""
Playlist Entity:
1. id (str, None): Unique identifier for the playlist. Assigned by the document store on creation.
2. name (str): Name of the playlist.
3. songs (list[Song]): Songs of the playlist with their tags, in insertion order.
"""

class Playlist(BaseModel):
    id: Optional[str] = None
    name: str
    songs: list[Song] = []


"""
DBPlaylist is the stored (wire) form of the playlist.
song_ids (serialized as songIds) is an ordered list, duplicates are not checked.
"""
class DBPlaylist(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    song_ids: list[str] = Field(default=[], alias='songIds')
