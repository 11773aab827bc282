# ============================================================================
# FILE: app/services/playlist_service.py
# ============================================================================
from typing import List, Optional, Union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import NotFound, not_found
from app.db.models.playlist import Playlist
from app.db.models.user import User
from app.schemas.playlist import PlaylistCreate, PlaylistUpdate
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """Service layer for playlist operations"""

    def list_playlists(self, db: Session) -> List[Playlist]:
        return db.query(Playlist).order_by(Playlist.created_at.desc(), Playlist.id.desc()).all()

    def get_user_playlists(self, db: Session, user_id: int) -> List[Playlist]:
        """Get all playlists for a user; unknown users simply have none"""
        return (
            db.query(Playlist)
            .filter(Playlist.user_id == user_id)
            .order_by(Playlist.created_at.desc(), Playlist.id.desc())
            .all()
        )

    def get_playlist(self, db: Session, playlist_id: int) -> Optional[Playlist]:
        return db.get(Playlist, playlist_id)

    def create_playlist(self, db: Session, playlist_data: PlaylistCreate) -> Union[Playlist, NotFound]:
        """Create a new playlist owned by playlist_data.user_id"""
        if not db.get(User, playlist_data.user_id):
            return not_found("user")

        try:
            playlist = Playlist(
                user_id=playlist_data.user_id,
                name=playlist_data.name,
                description=playlist_data.description,
                is_public=playlist_data.is_public,
            )
            db.add(playlist)
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist created: {playlist.id} for user {playlist.user_id}")
            return playlist
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise

    def update_playlist(self, db: Session, playlist_id: int, update_data: PlaylistUpdate) -> Optional[Playlist]:
        """Update playlist details (name, description, is_public)"""
        playlist = self.get_playlist(db, playlist_id)
        if not playlist:
            return None

        try:
            for field, value in update_data.model_dump(exclude_unset=True).items():
                setattr(playlist, field, value)
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist updated: {playlist_id}")
            return playlist
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating playlist: {e}")
            raise

    def delete_playlist(self, db: Session, playlist_id: int) -> bool:
        """Delete a playlist along with its song memberships"""
        playlist = self.get_playlist(db, playlist_id)
        if not playlist:
            return False

        try:
            db.delete(playlist)
            db.commit()
            logger.info(f"Playlist deleted: {playlist_id}")
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise

# Create singleton instance
playlist_service = PlaylistService()
