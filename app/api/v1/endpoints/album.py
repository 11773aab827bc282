# ============================================================================
# FILE: app/api/v1/endpoints/album.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.api.errors import unwrap
from app.api.params import EntityId
from app.db.session import get_db
from app.schemas.album import AlbumArtistAdd, AlbumCreate, AlbumResponse, AlbumUpdate
from app.schemas.details import AlbumDetail
from app.services.album_service import album_service
from app.services.detail_service import detail_service

router = APIRouter()

@router.get("", response_model=List[AlbumResponse])
async def list_albums(db: Session = Depends(get_db)):
    return album_service.list_albums(db)

@router.get("/{album_id}", response_model=AlbumDetail)
async def get_album(album_id: EntityId, db: Session = Depends(get_db)):
    """Get an album with its artists and songs"""
    return unwrap(detail_service.get_album_detail(db, album_id))

@router.post("", response_model=AlbumResponse, status_code=status.HTTP_201_CREATED)
async def create_album(album_data: AlbumCreate, db: Session = Depends(get_db)):
    return album_service.create_album(db, album_data)

@router.put("/{album_id}", response_model=AlbumResponse)
async def update_album(album_id: EntityId, update_data: AlbumUpdate, db: Session = Depends(get_db)):
    album = album_service.update_album(db, album_id, update_data)
    if not album:
        raise HTTPException(status_code=404, detail="Album not found")
    return album

@router.delete("/{album_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_album(album_id: EntityId, db: Session = Depends(get_db)):
    """
    Delete an album
    Songs on it are kept, with no album
    """
    if not album_service.delete_album(db, album_id):
        raise HTTPException(status_code=404, detail="Album not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{album_id}/artists", status_code=status.HTTP_201_CREATED)
async def add_artist_to_album(album_id: EntityId, data: AlbumArtistAdd, db: Session = Depends(get_db)):
    unwrap(album_service.add_artist(db, album_id, data.artist_id))
    return {"message": "Artist added to album"}
