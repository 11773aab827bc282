# ============================================================================
# FILE: app/schemas/artist.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from app.schemas.common import URL_PATTERN, reject_null

class ArtistCreate(BaseModel):
    """Schema for artist creation"""
    name: str = Field(..., min_length=1, max_length=255)
    bio: Optional[str] = Field(None, max_length=1000)
    image_url: Optional[str] = Field(None, pattern=URL_PATTERN)

class ArtistUpdate(BaseModel):
    """Schema for partial artist update; bio and image_url may be cleared"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = Field(None, max_length=1000)
    image_url: Optional[str] = Field(None, pattern=URL_PATTERN)

    @field_validator("name")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)

class ArtistResponse(BaseModel):
    id: int
    name: str
    bio: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

