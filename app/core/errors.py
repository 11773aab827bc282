# ============================================================================
# FILE: app/core/errors.py
# ============================================================================
from dataclasses import dataclass

@dataclass(frozen=True)
class NotFound:
    """A referenced entity (or playlist membership) does not exist"""
    entity: str
    message: str

@dataclass(frozen=True)
class Conflict:
    """The write would duplicate an existing relation"""
    message: str

@dataclass(frozen=True)
class StorageError:
    """The store failed; the cause is logged, not interpreted"""
    message: str = "Database error"

def not_found(entity: str) -> NotFound:
    return NotFound(entity=entity, message=f"{entity.capitalize()} not found")

MEMBERSHIP_NOT_FOUND = NotFound(entity="playlist_song", message="Song not found in playlist")
