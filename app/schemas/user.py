# ============================================================================
# FILE: app/schemas/user.py
# ============================================================================
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from app.schemas.common import reject_null

class UserCreate(BaseModel):
    """Schema for user creation"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr

class UserUpdate(BaseModel):
    """Schema for partial user update"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None

    @field_validator("name", "email")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)

class UserResponse(BaseModel):
    """Schema for user response"""
    id: int
    name: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True
