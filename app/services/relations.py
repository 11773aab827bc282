# ============================================================================
# FILE: app/services/relations.py
# Lookups of the entities related to a given id, used by detail views
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session
from app.db.models.album import Album, album_artists
from app.db.models.artist import Artist
from app.db.models.playlist import Playlist, PlaylistSong
from app.db.models.song import Song, song_artists
from app.db.models.user import User
from app.schemas.playlist import PlaylistSongEntry
from app.schemas.song import SongResponse

def get_song_artists(db: Session, song_id: int) -> List[Artist]:
    return (
        db.query(Artist)
        .join(song_artists, song_artists.c.artist_id == Artist.id)
        .filter(song_artists.c.song_id == song_id)
        .order_by(Artist.id)
        .all()
    )

def get_song_album(db: Session, song: Song) -> Optional[Album]:
    if song.album_id is None:
        return None
    return db.get(Album, song.album_id)

def get_album_artists(db: Session, album_id: int) -> List[Artist]:
    return (
        db.query(Artist)
        .join(album_artists, album_artists.c.artist_id == Artist.id)
        .filter(album_artists.c.album_id == album_id)
        .order_by(Artist.id)
        .all()
    )

def get_album_songs(db: Session, album_id: int) -> List[Song]:
    return db.query(Song).filter(Song.album_id == album_id).order_by(Song.id).all()

def get_artist_songs(db: Session, artist_id: int) -> List[Song]:
    return (
        db.query(Song)
        .join(song_artists, song_artists.c.song_id == Song.id)
        .filter(song_artists.c.artist_id == artist_id)
        .order_by(Song.id)
        .all()
    )

def get_artist_albums(db: Session, artist_id: int) -> List[Album]:
    return (
        db.query(Album)
        .join(album_artists, album_artists.c.album_id == Album.id)
        .filter(album_artists.c.artist_id == artist_id)
        .order_by(Album.id)
        .all()
    )

def get_playlist_user(db: Session, playlist: Playlist) -> Optional[User]:
    return db.get(User, playlist.user_id)

def get_playlist_entries(db: Session, playlist_id: int) -> List[PlaylistSongEntry]:
    """Member songs joined with position and added_at, by position"""
    rows = (
        db.query(Song, PlaylistSong.position, PlaylistSong.added_at)
        .join(PlaylistSong, PlaylistSong.song_id == Song.id)
        .filter(PlaylistSong.playlist_id == playlist_id)
        .order_by(PlaylistSong.position, PlaylistSong.added_at)
        .all()
    )
    return [
        PlaylistSongEntry(
            **SongResponse.model_validate(song).model_dump(),
            position=position,
            added_at=added_at,
        )
        for song, position, added_at in rows
    ]
