# ============================================================================
# FILE: app/services/album_service.py
# ============================================================================
from typing import List, Optional, Union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import Conflict, NotFound, not_found
from app.db.models.album import Album, album_artists
from app.db.models.artist import Artist
from app.schemas.album import AlbumCreate, AlbumUpdate
import logging

logger = logging.getLogger(__name__)

class AlbumService:
    """Service layer for album operations"""

    def list_albums(self, db: Session) -> List[Album]:
        return db.query(Album).order_by(Album.created_at.desc(), Album.id.desc()).all()

    def get_album(self, db: Session, album_id: int) -> Optional[Album]:
        return db.get(Album, album_id)

    def create_album(self, db: Session, album_data: AlbumCreate) -> Album:
        try:
            album = Album(**album_data.model_dump())
            db.add(album)
            db.commit()
            db.refresh(album)
            logger.info(f"Album created: {album.id}")
            return album
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating album: {e}")
            raise

    def update_album(self, db: Session, album_id: int, update_data: AlbumUpdate) -> Optional[Album]:
        album = self.get_album(db, album_id)
        if not album:
            return None

        try:
            for field, value in update_data.model_dump(exclude_unset=True).items():
                setattr(album, field, value)
            db.commit()
            db.refresh(album)
            logger.info(f"Album updated: {album_id}")
            return album
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating album: {e}")
            raise

    def delete_album(self, db: Session, album_id: int) -> bool:
        """Delete an album; its songs remain with album_id cleared"""
        album = self.get_album(db, album_id)
        if not album:
            return False

        try:
            db.delete(album)
            db.commit()
            logger.info(f"Album deleted: {album_id}")
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting album: {e}")
            raise

    def add_artist(self, db: Session, album_id: int, artist_id: int) -> Union[None, NotFound, Conflict]:
        """Credit an artist on an album"""
        if not self.get_album(db, album_id):
            return not_found("album")
        if not db.get(Artist, artist_id):
            return not_found("artist")

        existing = db.execute(
            album_artists.select().where(
                album_artists.c.album_id == album_id,
                album_artists.c.artist_id == artist_id,
            )
        ).first()
        if existing:
            return Conflict("Artist already associated with album")

        try:
            db.execute(album_artists.insert().values(album_id=album_id, artist_id=artist_id))
            db.commit()
            logger.info(f"Artist {artist_id} added to album {album_id}")
            return None
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error adding artist to album: {e}")
            raise

# Create singleton instance
album_service = AlbumService()
