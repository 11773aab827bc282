# ============================================================================
# FILE: app/api/v1/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.api.errors import unwrap
from app.api.params import EntityId
from app.db.session import get_db
from app.schemas.details import PlaylistDetail
from app.schemas.playlist import (
    PlaylistCreate,
    PlaylistUpdate,
    PlaylistResponse,
    PlaylistSongAdd,
    PlaylistSongAdded,
    PlaylistSongEntry,
    PlaylistSongReorder,
    PlaylistSongReordered,
)
from app.services.detail_service import detail_service
from app.services.playlist_service import playlist_service
from app.services.playlist_song_service import playlist_song_service

router = APIRouter()

@router.get("", response_model=List[PlaylistResponse])
async def list_playlists(db: Session = Depends(get_db)):
    """Get all playlists, newest first"""
    return playlist_service.list_playlists(db)

@router.get("/user/{user_id}", response_model=List[PlaylistResponse])
async def get_playlists_by_user(user_id: EntityId, db: Session = Depends(get_db)):
    return playlist_service.get_user_playlists(db, user_id)

@router.post("", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
async def create_playlist(playlist_data: PlaylistCreate, db: Session = Depends(get_db)):
    """
    Create a new playlist
    The owning user must exist
    """
    return unwrap(playlist_service.create_playlist(db, playlist_data))

@router.get("/{playlist_id}", response_model=PlaylistDetail)
async def get_playlist(playlist_id: EntityId, db: Session = Depends(get_db)):
    """Get a playlist with its ordered songs and its owner"""
    return unwrap(detail_service.get_playlist_detail(db, playlist_id))

@router.put("/{playlist_id}", response_model=PlaylistResponse)
async def update_playlist(playlist_id: EntityId, update_data: PlaylistUpdate, db: Session = Depends(get_db)):
    """Update playlist details (name, description, is_public)"""
    playlist = playlist_service.update_playlist(db, playlist_id, update_data)
    if not playlist:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return playlist

@router.delete("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_playlist(playlist_id: EntityId, db: Session = Depends(get_db)):
    if not playlist_service.delete_playlist(db, playlist_id):
        raise HTTPException(status_code=404, detail="Playlist not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{playlist_id}/songs", response_model=List[PlaylistSongEntry])
async def list_playlist_songs(playlist_id: EntityId, db: Session = Depends(get_db)):
    return unwrap(playlist_song_service.list_songs(db, playlist_id))

@router.post("/{playlist_id}/songs", response_model=PlaylistSongAdded, status_code=status.HTTP_201_CREATED)
async def add_song_to_playlist(playlist_id: EntityId, song_data: PlaylistSongAdd, db: Session = Depends(get_db)):
    """
    Add a song to a playlist
    Without a position the song goes to the end; otherwise later songs move down
    """
    position = unwrap(playlist_song_service.add_song(db, playlist_id, song_data.song_id, song_data.position))
    return PlaylistSongAdded(position=position)

@router.put("/{playlist_id}/songs/{song_id}", response_model=PlaylistSongReordered)
async def reorder_song(playlist_id: EntityId, song_id: EntityId, data: PlaylistSongReorder, db: Session = Depends(get_db)):
    """
    Move a song to new_position
    Other songs keep their positions
    """
    new_position = unwrap(playlist_song_service.reorder_song(db, playlist_id, song_id, data.new_position))
    return PlaylistSongReordered(new_position=new_position)

@router.delete("/{playlist_id}/songs/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_song_from_playlist(playlist_id: EntityId, song_id: EntityId, db: Session = Depends(get_db)):
    """Remove a song from a playlist; later songs move up"""
    unwrap(playlist_song_service.remove_song(db, playlist_id, song_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
