from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


"""
Tag Entity:
1. id (str, None): Unique identifier for the tag. Assigned by the document store on creation,
so it is None only for a tag that hasn't been saved yet.
2. name (str): Display name of the tag.
3. tag_color (str): Color of the tag (serialized as tagColor). Any CSS color string, not validated.
"""
class Tag(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str
    tag_color: str = Field(alias='tagColor')


"""
DBTag is the stored (wire) form of the tag. The id is the document key, not a field.
"""
class DBTag(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    tag_color: str = Field(alias='tagColor')
