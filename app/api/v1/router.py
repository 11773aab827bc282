# ============================================================================
# FILE: app/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from app.api.v1.endpoints import album, artist, playlist, song, user

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(user.router, prefix="/users", tags=["users"])
api_router.include_router(artist.router, prefix="/artists", tags=["artists"])
api_router.include_router(album.router, prefix="/albums", tags=["albums"])
api_router.include_router(song.router, prefix="/songs", tags=["songs"])
api_router.include_router(playlist.router, prefix="/playlists", tags=["playlists"])
