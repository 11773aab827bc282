"""
conftest.py - shared fixtures: in-memory SQLite store, sessions, API client.
"""
import os

# Minimal env before app.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.models.album import Album
from app.db.models.artist import Artist
from app.db.models.playlist import Playlist, PlaylistSong
from app.db.models.song import Song
from app.db.models.user import User
from app.db.session import create_db_engine, get_db


# ── In-memory SQLite engine ────────────────────────────────────────────────

@pytest.fixture
def engine():
    """One shared in-memory connection per test, foreign keys enforced."""
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ── Seed helpers ───────────────────────────────────────────────────────────

@pytest.fixture
def make_user(db_session):
    counter = {"n": 0}

    def _make(name="Test User", email=None):
        counter["n"] += 1
        user = User(name=name, email=email or f"user{counter['n']}@example.com")
        db_session.add(user)
        db_session.commit()
        return user
    return _make


@pytest.fixture
def make_playlist(db_session, make_user):
    def _make(name="Road Trip", user=None, is_public=True):
        owner = user or make_user()
        playlist = Playlist(name=name, user_id=owner.id, is_public=is_public)
        db_session.add(playlist)
        db_session.commit()
        return playlist
    return _make


@pytest.fixture
def make_song(db_session):
    def _make(title="Song", duration=180, album=None, artists=()):
        song = Song(title=title, duration=duration, album_id=album.id if album else None)
        song.artists = list(artists)
        db_session.add(song)
        db_session.commit()
        return song
    return _make


@pytest.fixture
def make_artist(db_session):
    def _make(name="Artist"):
        artist = Artist(name=name)
        db_session.add(artist)
        db_session.commit()
        return artist
    return _make


@pytest.fixture
def make_album(db_session):
    def _make(title="Album", release_year=2001):
        album = Album(title=title, release_year=release_year)
        db_session.add(album)
        db_session.commit()
        return album
    return _make


def playlist_positions(db, playlist_id):
    """[(song_id, position), ...] ordered by position"""
    rows = (
        db.query(PlaylistSong.song_id, PlaylistSong.position)
        .filter(PlaylistSong.playlist_id == playlist_id)
        .order_by(PlaylistSong.position, PlaylistSong.song_id)
        .all()
    )
    return [tuple(row) for row in rows]


@pytest.fixture
def positions(db_session):
    def _positions(playlist_id):
        db_session.expire_all()
        return playlist_positions(db_session, playlist_id)
    return _positions
