# ============================================================================
# FILE: app/db/models/album.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base

album_artists = Table(
    "album_artists",
    Base.metadata,
    Column("album_id", Integer, ForeignKey("albums.id", ondelete="CASCADE"), primary_key=True),
    Column("artist_id", Integer, ForeignKey("artists.id", ondelete="CASCADE"), primary_key=True),
)

class Album(Base):
    """Album model; deleting it clears songs.album_id"""
    __tablename__ = "albums"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    release_year = Column(Integer, nullable=True)
    cover_art_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    artists = relationship("Artist", secondary=album_artists, back_populates="albums", passive_deletes=True)
    songs = relationship("Song", back_populates="album", passive_deletes=True)
