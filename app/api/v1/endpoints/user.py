# ============================================================================
# FILE: app/api/v1/endpoints/user.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.api.errors import unwrap
from app.api.params import EntityId
from app.db.session import get_db
from app.schemas.playlist import PlaylistResponse
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.playlist_service import playlist_service
from app.services.user_service import user_service

router = APIRouter()

@router.get("", response_model=List[UserResponse])
async def list_users(db: Session = Depends(get_db)):
    """Get all users, newest first"""
    return user_service.list_users(db)

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: EntityId, db: Session = Depends(get_db)):
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Create a user
    Email must not be registered yet
    """
    return unwrap(user_service.create_user(db, user_data))

@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: EntityId, update_data: UserUpdate, db: Session = Depends(get_db)):
    return unwrap(user_service.update_user(db, user_id, update_data))

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: EntityId, db: Session = Depends(get_db)):
    """
    Delete a user
    Their playlists are deleted too
    """
    if not user_service.delete_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{user_id}/playlists", response_model=List[PlaylistResponse])
async def get_user_playlists(user_id: EntityId, db: Session = Depends(get_db)):
    return playlist_service.get_user_playlists(db, user_id)
