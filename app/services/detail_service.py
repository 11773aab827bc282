# ============================================================================
# FILE: app/services/detail_service.py
# ============================================================================
from typing import Union
from sqlalchemy.orm import Session
from app.core.errors import NotFound, not_found
from app.db.models.album import Album
from app.db.models.artist import Artist
from app.db.models.playlist import Playlist
from app.db.models.song import Song
from app.schemas.album import AlbumResponse
from app.schemas.artist import ArtistResponse
from app.schemas.details import AlbumDetail, ArtistDetail, PlaylistDetail, SongDetail
from app.schemas.playlist import PlaylistResponse
from app.schemas.song import SongResponse
from app.schemas.user import UserResponse
from app.services import relations

class DetailService:
    """Read-only composition of an entity with its related entities"""

    def get_playlist_detail(self, db: Session, playlist_id: int) -> Union[PlaylistDetail, NotFound]:
        """Playlist with its songs in position order and its owner"""
        playlist = db.get(Playlist, playlist_id)
        if not playlist:
            return not_found("playlist")

        owner = relations.get_playlist_user(db, playlist)
        return PlaylistDetail(
            **PlaylistResponse.model_validate(playlist).model_dump(),
            songs=relations.get_playlist_entries(db, playlist_id),
            user=UserResponse.model_validate(owner) if owner else None,
        )

    def get_song_detail(self, db: Session, song_id: int) -> Union[SongDetail, NotFound]:
        song = db.get(Song, song_id)
        if not song:
            return not_found("song")

        album = relations.get_song_album(db, song)
        return SongDetail(
            **SongResponse.model_validate(song).model_dump(),
            artists=[ArtistResponse.model_validate(a) for a in relations.get_song_artists(db, song_id)],
            album=AlbumResponse.model_validate(album) if album else None,
        )

    def get_album_detail(self, db: Session, album_id: int) -> Union[AlbumDetail, NotFound]:
        album = db.get(Album, album_id)
        if not album:
            return not_found("album")

        return AlbumDetail(
            **AlbumResponse.model_validate(album).model_dump(),
            artists=[ArtistResponse.model_validate(a) for a in relations.get_album_artists(db, album_id)],
            songs=[SongResponse.model_validate(s) for s in relations.get_album_songs(db, album_id)],
        )

    def get_artist_detail(self, db: Session, artist_id: int) -> Union[ArtistDetail, NotFound]:
        artist = db.get(Artist, artist_id)
        if not artist:
            return not_found("artist")

        return ArtistDetail(
            **ArtistResponse.model_validate(artist).model_dump(),
            songs=[SongResponse.model_validate(s) for s in relations.get_artist_songs(db, artist_id)],
            albums=[AlbumResponse.model_validate(a) for a in relations.get_artist_albums(db, artist_id)],
        )

# Create singleton instance
detail_service = DetailService()
