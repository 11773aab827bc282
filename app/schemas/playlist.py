# ============================================================================
# FILE: app/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from app.schemas.common import MAX_DB_INT, reject_null
from app.schemas.song import SongResponse

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    user_id: int = Field(..., gt=0, le=MAX_DB_INT)
    is_public: bool = True

class PlaylistUpdate(BaseModel):
    """Schema for updating a playlist; the owner cannot be changed"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    is_public: Optional[bool] = None

    @field_validator("name", "is_public")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)

class PlaylistSongAdd(BaseModel):
    """Schema for adding a song to playlist; no position appends at the end"""
    song_id: int = Field(..., gt=0, le=MAX_DB_INT)
    position: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)

class PlaylistSongReorder(BaseModel):
    """Schema for moving a song within a playlist"""
    new_position: int = Field(..., gt=0, le=MAX_DB_INT)

class PlaylistSongAdded(BaseModel):
    message: str = "Song added to playlist"
    position: int

class PlaylistSongReordered(BaseModel):
    message: str = "Song position updated"
    new_position: int

class PlaylistSongEntry(SongResponse):
    """A playlist member song with its position"""
    position: int
    added_at: datetime

class PlaylistResponse(BaseModel):
    """Schema for playlist response"""
    id: int
    name: str
    description: Optional[str] = None
    user_id: int
    is_public: bool
    created_at: datetime

    class Config:
        from_attributes = True
