# ============================================================================
# FILE: app/api/v1/endpoints/song.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.api.errors import unwrap
from app.api.params import EntityId
from app.db.session import get_db
from app.schemas.details import SongDetail
from app.schemas.song import SongCreate, SongResponse, SongUpdate
from app.services.detail_service import detail_service
from app.services.song_service import song_service

router = APIRouter()

@router.get("", response_model=List[SongResponse])
async def list_songs(db: Session = Depends(get_db)):
    return song_service.list_songs(db)

@router.get("/artist/{artist_id}", response_model=List[SongResponse])
async def get_songs_by_artist(artist_id: EntityId, db: Session = Depends(get_db)):
    return song_service.get_songs_by_artist(db, artist_id)

@router.get("/album/{album_id}", response_model=List[SongResponse])
async def get_songs_by_album(album_id: EntityId, db: Session = Depends(get_db)):
    return song_service.get_songs_by_album(db, album_id)

@router.get("/{song_id}", response_model=SongDetail)
async def get_song(song_id: EntityId, db: Session = Depends(get_db)):
    """Get a song with its artists and album"""
    return unwrap(detail_service.get_song_detail(db, song_id))

@router.post("", response_model=SongDetail, status_code=status.HTTP_201_CREATED)
async def create_song(song_data: SongCreate, db: Session = Depends(get_db)):
    """
    Create a song
    All artist_ids and the album_id (if any) must exist
    """
    song = unwrap(song_service.create_song(db, song_data))
    return unwrap(detail_service.get_song_detail(db, song.id))

@router.put("/{song_id}", response_model=SongResponse)
async def update_song(song_id: EntityId, update_data: SongUpdate, db: Session = Depends(get_db)):
    return unwrap(song_service.update_song(db, song_id, update_data))

@router.delete("/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_song(song_id: EntityId, db: Session = Depends(get_db)):
    """
    Delete a song
    It is removed from every playlist and those playlists are renumbered
    """
    if not song_service.delete_song(db, song_id):
        raise HTTPException(status_code=404, detail="Song not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
