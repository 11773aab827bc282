# ============================================================================
# FILE: app/schemas/album.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from app.schemas.common import MAX_DB_INT, URL_PATTERN, check_release_year, reject_null

class AlbumCreate(BaseModel):
    """Schema for album creation"""
    title: str = Field(..., min_length=1, max_length=255)
    release_year: Optional[int] = Field(None, ge=1900)
    cover_art_url: Optional[str] = Field(None, pattern=URL_PATTERN)

    @field_validator("release_year")
    @classmethod
    def release_year_not_future(cls, value):
        return check_release_year(value)

class AlbumUpdate(BaseModel):
    """Schema for partial album update"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    release_year: Optional[int] = Field(None, ge=1900)
    cover_art_url: Optional[str] = Field(None, pattern=URL_PATTERN)

    @field_validator("release_year")
    @classmethod
    def release_year_not_future(cls, value):
        return check_release_year(value)

    @field_validator("title")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)

class AlbumArtistAdd(BaseModel):
    """Schema for linking an artist to an album"""
    artist_id: int = Field(..., gt=0, le=MAX_DB_INT)

class AlbumResponse(BaseModel):
    id: int
    title: str
    release_year: Optional[int] = None
    cover_art_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
