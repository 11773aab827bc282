# ============================================================================
# FILE: app/services/artist_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.artist import Artist
from app.schemas.artist import ArtistCreate, ArtistUpdate
import logging

logger = logging.getLogger(__name__)

class ArtistService:
    """Service layer for artist operations"""

    def list_artists(self, db: Session) -> List[Artist]:
        return db.query(Artist).order_by(Artist.name, Artist.id).all()

    def get_artist(self, db: Session, artist_id: int) -> Optional[Artist]:
        return db.get(Artist, artist_id)

    def create_artist(self, db: Session, artist_data: ArtistCreate) -> Artist:
        try:
            artist = Artist(**artist_data.model_dump())
            db.add(artist)
            db.commit()
            db.refresh(artist)
            logger.info(f"Artist created: {artist.id}")
            return artist
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating artist: {e}")
            raise

    def update_artist(self, db: Session, artist_id: int, update_data: ArtistUpdate) -> Optional[Artist]:
        artist = self.get_artist(db, artist_id)
        if not artist:
            return None

        try:
            for field, value in update_data.model_dump(exclude_unset=True).items():
                setattr(artist, field, value)
            db.commit()
            db.refresh(artist)
            logger.info(f"Artist updated: {artist_id}")
            return artist
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating artist: {e}")
            raise

    def delete_artist(self, db: Session, artist_id: int) -> bool:
        """Delete an artist; song and album credits are dropped, songs stay"""
        artist = self.get_artist(db, artist_id)
        if not artist:
            return False

        try:
            db.delete(artist)
            db.commit()
            logger.info(f"Artist deleted: {artist_id}")
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting artist: {e}")
            raise

# Create singleton instance
artist_service = ArtistService()
