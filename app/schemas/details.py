# ============================================================================
# FILE: app/schemas/details.py
# Aggregates returned by the detail endpoints
# ============================================================================
from typing import List, Optional
from app.schemas.album import AlbumResponse
from app.schemas.artist import ArtistResponse
from app.schemas.playlist import PlaylistResponse, PlaylistSongEntry
from app.schemas.song import SongResponse
from app.schemas.user import UserResponse

class PlaylistDetail(PlaylistResponse):
    songs: List[PlaylistSongEntry] = []
    user: Optional[UserResponse] = None

class SongDetail(SongResponse):
    artists: List[ArtistResponse] = []
    album: Optional[AlbumResponse] = None

class AlbumDetail(AlbumResponse):
    artists: List[ArtistResponse] = []
    songs: List[SongResponse] = []

class ArtistDetail(ArtistResponse):
    songs: List[SongResponse] = []
    albums: List[AlbumResponse] = []
