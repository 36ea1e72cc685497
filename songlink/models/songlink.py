from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = ("Song", "SongLinkEntity", "SongLinkResponse")


class Song(BaseModel):
    """A song normalized from a song.link lookup"""

    url: str
    title: Optional[str] = None
    artist: Optional[str] = None


class SongLinkEntity(BaseModel):
    """One provider's match for a song"""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    artist: Optional[str] = Field(None, alias="artistName")
    provider: str = Field(alias="apiProvider")


class SongLinkResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="entityUniqueId")
    url: str = Field(alias="pageUrl")
    entities: Dict[str, SongLinkEntity] = Field(alias="entitiesByUniqueId")
