# ============================================================================
# FILE: app/core/logging.py
# ============================================================================
import logging
import sys
from app.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False

def setup_logging() -> None:
    """Configure the root logger once for the whole application"""
    global _configured
    if _configured:
        return

    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    # SQL echo goes through the sqlalchemy logger, keep it quiet unless asked
    if not settings.SQL_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _configured = True
