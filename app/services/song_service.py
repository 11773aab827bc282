# ============================================================================
# FILE: app/services/song_service.py
# ============================================================================
from typing import List, Optional, Union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import NotFound, not_found
from app.db.models.album import Album
from app.db.models.artist import Artist
from app.db.models.song import Song
from app.schemas.song import SongCreate, SongUpdate
from app.services.playlist_song_service import playlist_song_service
from app.services.relations import get_album_songs, get_artist_songs
import logging

logger = logging.getLogger(__name__)

class SongService:
    """Service layer for song operations"""

    def list_songs(self, db: Session) -> List[Song]:
        return db.query(Song).order_by(Song.created_at.desc(), Song.id.desc()).all()

    def get_song(self, db: Session, song_id: int) -> Optional[Song]:
        return db.get(Song, song_id)

    def create_song(self, db: Session, song_data: SongCreate) -> Union[Song, NotFound]:
        """Create a song credited to every artist in artist_ids"""
        if song_data.album_id is not None and not db.get(Album, song_data.album_id):
            return not_found("album")

        artist_ids = list(dict.fromkeys(song_data.artist_ids))
        artists = db.query(Artist).filter(Artist.id.in_(artist_ids)).all()
        if len(artists) != len(artist_ids):
            return not_found("artist")

        try:
            song = Song(
                title=song_data.title,
                duration=song_data.duration,
                file_url=song_data.file_url,
                album_id=song_data.album_id,
            )
            song.artists = artists
            db.add(song)
            db.commit()
            db.refresh(song)
            logger.info(f"Song created: {song.id} with artists {artist_ids}")
            return song
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating song: {e}")
            raise

    def update_song(self, db: Session, song_id: int, update_data: SongUpdate) -> Union[Song, NotFound]:
        """Update only the fields present in the request"""
        song = self.get_song(db, song_id)
        if not song:
            return not_found("song")

        changes = update_data.model_dump(exclude_unset=True)
        if changes.get("album_id") is not None and not db.get(Album, changes["album_id"]):
            return not_found("album")

        try:
            for field, value in changes.items():
                setattr(song, field, value)
            db.commit()
            db.refresh(song)
            logger.info(f"Song updated: {song_id}")
            return song
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating song: {e}")
            raise

    def delete_song(self, db: Session, song_id: int) -> bool:
        """Delete a song, compacting every playlist that contained it"""
        song = self.get_song(db, song_id)
        if not song:
            return False

        try:
            playlist_ids = playlist_song_service.detach_song(db, song_id)
            # the memberships are gone; a loaded collection would delete them twice
            db.expire(song, ["playlist_entries"])
            db.delete(song)
            db.commit()
            logger.info(f"Song deleted: {song_id} (removed from playlists {playlist_ids})")
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting song: {e}")
            raise

    def get_songs_by_artist(self, db: Session, artist_id: int) -> List[Song]:
        return get_artist_songs(db, artist_id)

    def get_songs_by_album(self, db: Session, album_id: int) -> List[Song]:
        return get_album_songs(db, album_id)

# Create singleton instance
song_service = SongService()
