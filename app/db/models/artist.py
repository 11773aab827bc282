# ============================================================================
# FILE: app/db/models/artist.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base

class Artist(Base):
    """Artist model, many-to-many with songs and albums"""
    __tablename__ = "artists"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    songs = relationship("Song", secondary="song_artists", back_populates="artists", passive_deletes=True)
    albums = relationship("Album", secondary="album_artists", back_populates="artists", passive_deletes=True)
