# ============================================================================
# FILE: app/api/params.py
# ============================================================================
from typing import Annotated
from fastapi import Path
from app.schemas.common import MAX_DB_INT

# Path ids are bound to the store's integer range; larger values fail validation
EntityId = Annotated[int, Path(le=MAX_DB_INT)]
