# ============================================================================
# FILE: app/schemas/common.py
# ============================================================================
from datetime import datetime

URL_PATTERN = r"^https?://[^\s/$.?#][^\s]*$"

# SQLite INTEGER is a signed 64-bit value
MAX_DB_INT = 2**63 - 1

def reject_null(value, label: str):
    """Update schemas: a non-nullable field may be omitted but not set to null"""
    if value is None:
        raise ValueError(f"{label} must not be null")
    return value

def check_release_year(value):
    if value is not None and value > datetime.utcnow().year + 1:
        raise ValueError("Release year cannot be in the future")
    return value
