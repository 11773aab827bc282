# ============================================================================
# FILE: app/api/v1/endpoints/artist.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.api.errors import unwrap
from app.api.params import EntityId
from app.db.session import get_db
from app.schemas.artist import ArtistCreate, ArtistResponse, ArtistUpdate
from app.schemas.details import ArtistDetail
from app.services.artist_service import artist_service
from app.services.detail_service import detail_service

router = APIRouter()

@router.get("", response_model=List[ArtistResponse])
async def list_artists(db: Session = Depends(get_db)):
    return artist_service.list_artists(db)

@router.get("/{artist_id}", response_model=ArtistDetail)
async def get_artist(artist_id: EntityId, db: Session = Depends(get_db)):
    """Get an artist with their songs and albums"""
    return unwrap(detail_service.get_artist_detail(db, artist_id))

@router.post("", response_model=ArtistResponse, status_code=status.HTTP_201_CREATED)
async def create_artist(artist_data: ArtistCreate, db: Session = Depends(get_db)):
    return artist_service.create_artist(db, artist_data)

@router.put("/{artist_id}", response_model=ArtistResponse)
async def update_artist(artist_id: EntityId, update_data: ArtistUpdate, db: Session = Depends(get_db)):
    artist = artist_service.update_artist(db, artist_id, update_data)
    if not artist:
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist

@router.delete("/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artist(artist_id: EntityId, db: Session = Depends(get_db)):
    if not artist_service.delete_artist(db, artist_id):
        raise HTTPException(status_code=404, detail="Artist not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
