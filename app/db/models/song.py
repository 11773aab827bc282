# ============================================================================
# FILE: app/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base

song_artists = Table(
    "song_artists",
    Base.metadata,
    Column("song_id", Integer, ForeignKey("songs.id", ondelete="CASCADE"), primary_key=True),
    Column("artist_id", Integer, ForeignKey("artists.id", ondelete="CASCADE"), primary_key=True),
)

class Song(Base):
    """Song model; duration is in seconds"""
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    duration = Column(Integer, nullable=False)
    file_url = Column(String, nullable=True)
    album_id = Column(Integer, ForeignKey("albums.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    album = relationship("Album", back_populates="songs")
    artists = relationship("Artist", secondary=song_artists, back_populates="songs", passive_deletes=True)
    playlist_entries = relationship(
        "PlaylistSong",
        back_populates="song",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
