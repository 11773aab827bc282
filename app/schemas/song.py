# ============================================================================
# FILE: app/schemas/song.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from app.schemas.common import MAX_DB_INT, URL_PATTERN, reject_null

class SongCreate(BaseModel):
    """Schema for song creation; at least one artist is required"""
    title: str = Field(..., min_length=1, max_length=255)
    duration: int = Field(..., gt=0, le=MAX_DB_INT, description="Duration in seconds")
    file_url: Optional[str] = Field(None, pattern=URL_PATTERN)
    album_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    artist_ids: List[int] = Field(..., min_length=1)

    @field_validator("artist_ids")
    @classmethod
    def positive_ids(cls, value):
        if any(artist_id <= 0 for artist_id in value):
            raise ValueError("Artist ID must be positive")
        if any(artist_id > MAX_DB_INT for artist_id in value):
            raise ValueError("Artist ID is too large")
        return value

class SongUpdate(BaseModel):
    """Schema for partial song update; artists are not updatable here"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    duration: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    file_url: Optional[str] = Field(None, pattern=URL_PATTERN)
    album_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)

    @field_validator("title", "duration")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)

class SongResponse(BaseModel):
    id: int
    title: str
    duration: int
    file_url: Optional[str] = None
    album_id: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True
