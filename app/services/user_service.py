# ============================================================================
# FILE: app/services/user_service.py
# ============================================================================
from typing import List, Optional, Union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import Conflict, NotFound, not_found
from app.db.models.user import User
from app.schemas.user import UserCreate, UserUpdate
import logging

logger = logging.getLogger(__name__)

EMAIL_TAKEN = Conflict("Email already exists")

class UserService:
    """Service layer for user operations"""

    def list_users(self, db: Session) -> List[User]:
        return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        return db.get(User, user_id)

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()

    def create_user(self, db: Session, user_data: UserCreate) -> Union[User, Conflict]:
        """Create a new user; emails are unique"""
        if self.get_user_by_email(db, user_data.email):
            return EMAIL_TAKEN

        try:
            user = User(name=user_data.name, email=user_data.email)
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.id}")
            return user
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

    def update_user(self, db: Session, user_id: int, update_data: UserUpdate) -> Union[User, NotFound, Conflict]:
        """Update only the fields present in the request"""
        user = self.get_user(db, user_id)
        if not user:
            return not_found("user")

        changes = update_data.model_dump(exclude_unset=True)
        if "email" in changes and changes["email"] != user.email:
            if self.get_user_by_email(db, changes["email"]):
                return EMAIL_TAKEN

        try:
            for field, value in changes.items():
                setattr(user, field, value)
            db.commit()
            db.refresh(user)
            logger.info(f"User updated: {user_id}")
            return user
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating user: {e}")
            raise

    def delete_user(self, db: Session, user_id: int) -> bool:
        """Delete a user; their playlists go with them"""
        user = self.get_user(db, user_id)
        if not user:
            return False

        try:
            db.delete(user)
            db.commit()
            logger.info(f"User deleted: {user_id}")
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting user: {e}")
            raise

# Create singleton instance
user_service = UserService()
