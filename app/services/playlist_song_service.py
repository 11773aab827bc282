# ============================================================================
# FILE: app/services/playlist_song_service.py
# ============================================================================
from typing import List, Optional, Union
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import (
    MEMBERSHIP_NOT_FOUND,
    Conflict,
    NotFound,
    StorageError,
    not_found,
)
from app.db.models.playlist import Playlist, PlaylistSong
from app.db.models.song import Song
from app.schemas.playlist import PlaylistSongEntry
from app.services.relations import get_playlist_entries
import logging

logger = logging.getLogger(__name__)

# sqlite3 raises OverflowError, not a DBAPI error, for integers past 64 bits
STORE_ERRORS = (SQLAlchemyError, OverflowError)

class PlaylistSongService:
    """
    Membership and ordering of songs within playlists.

    Positions are 1-indexed. Adding and removing keep a playlist's positions
    dense (exactly 1..k for k members); the shift and the insert/delete are
    committed together, so no reader sees a half-shifted playlist.
    Reordering writes the requested position as-is and leaves the other
    members untouched, so it can leave gaps or duplicates.

    Expected failures are returned, not raised: each method returns its
    value or one of NotFound, Conflict, StorageError.
    """

    def list_songs(self, db: Session, playlist_id: int) -> Union[List[PlaylistSongEntry], NotFound, StorageError]:
        """Member songs with position and added_at, ordered by position"""
        try:
            if db.get(Playlist, playlist_id) is None:
                return not_found("playlist")
            return get_playlist_entries(db, playlist_id)
        except STORE_ERRORS as e:
            logger.error(f"Error listing songs of playlist {playlist_id}: {e}")
            return StorageError()

    def add_song(
        self,
        db: Session,
        playlist_id: int,
        song_id: int,
        position: Optional[int] = None,
    ) -> Union[int, NotFound, Conflict, StorageError]:
        """
        Add a song to a playlist and return the position it was given.

        Without a position the song is appended at count + 1. With one, every
        member at or after that position moves down by one first. Positions
        past the end are clamped to count + 1 so the playlist stays dense.
        """
        try:
            if db.get(Playlist, playlist_id) is None:
                return not_found("playlist")
            if db.get(Song, song_id) is None:
                return not_found("song")
            if self._get_membership(db, playlist_id, song_id) is not None:
                return Conflict("Song already in playlist")

            count = self._count(db, playlist_id)
            if position is None or position > count + 1:
                if position is not None:
                    logger.debug(f"Position {position} past end of playlist {playlist_id}, appending at {count + 1}")
                target = count + 1
            else:
                target = position
                self._shift(db, playlist_id, start=target, delta=1)

            db.add(PlaylistSong(playlist_id=playlist_id, song_id=song_id, position=target))
            db.commit()
        except STORE_ERRORS as e:
            db.rollback()
            logger.error(f"Error adding song {song_id} to playlist {playlist_id}: {e}")
            return StorageError()

        logger.info(f"Song {song_id} added to playlist {playlist_id} at position {target}")
        return target

    def remove_song(self, db: Session, playlist_id: int, song_id: int) -> Union[None, NotFound, StorageError]:
        """Remove a song and close the gap it leaves"""
        try:
            membership = self._get_membership(db, playlist_id, song_id)
            if membership is None:
                return MEMBERSHIP_NOT_FOUND

            removed_position = membership.position
            db.delete(membership)
            db.flush()
            self._shift(db, playlist_id, start=removed_position + 1, delta=-1)
            db.commit()
        except STORE_ERRORS as e:
            db.rollback()
            logger.error(f"Error removing song {song_id} from playlist {playlist_id}: {e}")
            return StorageError()

        logger.info(f"Song {song_id} removed from playlist {playlist_id} (was at {removed_position})")
        return None

    def reorder_song(
        self,
        db: Session,
        playlist_id: int,
        song_id: int,
        new_position: int,
    ) -> Union[int, NotFound, StorageError]:
        """
        Set a member's position to new_position.

        Other members keep their positions, even when that produces a
        duplicate or a gap. Callers rely on this overwrite behaviour.
        """
        try:
            membership = self._get_membership(db, playlist_id, song_id)
            if membership is None:
                return MEMBERSHIP_NOT_FOUND

            membership.position = new_position
            db.commit()
        except STORE_ERRORS as e:
            db.rollback()
            logger.error(f"Error reordering song {song_id} in playlist {playlist_id}: {e}")
            return StorageError()

        logger.info(f"Song {song_id} in playlist {playlist_id} moved to position {new_position}")
        return new_position

    def detach_song(self, db: Session, song_id: int) -> List[int]:
        """
        Drop a song from every playlist, compacting each one.

        Runs inside the caller's transaction and does not commit; used when
        the song itself is being deleted. Returns the affected playlist ids.
        """
        affected = []
        memberships = db.query(PlaylistSong).filter(PlaylistSong.song_id == song_id).all()
        for membership in memberships:
            playlist_id, removed_position = membership.playlist_id, membership.position
            affected.append(playlist_id)
            db.delete(membership)
            db.flush()
            self._shift(db, playlist_id, start=removed_position + 1, delta=-1)
        return affected

    def _get_membership(self, db: Session, playlist_id: int, song_id: int) -> Optional[PlaylistSong]:
        return db.get(PlaylistSong, (playlist_id, song_id))

    def _count(self, db: Session, playlist_id: int) -> int:
        return (
            db.query(func.count())
            .select_from(PlaylistSong)
            .filter(PlaylistSong.playlist_id == playlist_id)
            .scalar()
        )

    def _shift(self, db: Session, playlist_id: int, start: int, delta: int) -> int:
        """Add delta to every position >= start in the playlist"""
        return (
            db.query(PlaylistSong)
            .filter(PlaylistSong.playlist_id == playlist_id, PlaylistSong.position >= start)
            .update({PlaylistSong.position: PlaylistSong.position + delta}, synchronize_session="evaluate")
        )

# Create singleton instance
playlist_song_service = PlaylistSongService()
