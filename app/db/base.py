# ============================================================================
# FILE: app/db/base.py
# ============================================================================
from sqlalchemy.orm import declarative_base

Base = declarative_base()

def import_models():
    """Register every model on Base.metadata before create_all()"""
    from app.db.models import user, artist, album, song, playlist  # noqa: F401
