"""
Tests for app/services/detail_service.py - composed detail views.
"""
from app.core.errors import NotFound
from app.db.models.album import album_artists
from app.services.detail_service import detail_service
from app.services.playlist_song_service import playlist_song_service


def test_playlist_detail_orders_songs_and_includes_owner(db_session, make_user, make_playlist, make_song):
    owner = make_user(name="Dana", email="dana@example.com")
    playlist = make_playlist(user=owner)
    first, second = make_song(title="First"), make_song(title="Second")
    playlist_song_service.add_song(db_session, playlist.id, first.id)
    playlist_song_service.add_song(db_session, playlist.id, second.id, position=1)

    detail = detail_service.get_playlist_detail(db_session, playlist.id)

    assert [(s.title, s.position) for s in detail.songs] == [("Second", 1), ("First", 2)]
    assert detail.user.name == "Dana"
    assert detail.is_public is True


def test_song_detail(db_session, make_artist, make_album, make_song):
    artist = make_artist(name="Nina Simone")
    album = make_album(title="Pastel Blues", release_year=1965)
    song = make_song(title="Sinnerman", duration=622, album=album, artists=[artist])

    detail = detail_service.get_song_detail(db_session, song.id)

    assert [a.name for a in detail.artists] == ["Nina Simone"]
    assert detail.album.title == "Pastel Blues"


def test_song_detail_without_album(db_session, make_artist, make_song):
    song = make_song(artists=[make_artist()])
    assert detail_service.get_song_detail(db_session, song.id).album is None


def test_album_and_artist_details(db_session, make_artist, make_album, make_song):
    artist = make_artist(name="Portishead")
    album = make_album(title="Dummy", release_year=1994)
    db_session.execute(album_artists.insert().values(album_id=album.id, artist_id=artist.id))
    db_session.commit()
    roads = make_song(title="Roads", album=album, artists=[artist])
    glory = make_song(title="Glory Box", album=album, artists=[artist])

    album_detail = detail_service.get_album_detail(db_session, album.id)
    artist_detail = detail_service.get_artist_detail(db_session, artist.id)

    assert [s.id for s in album_detail.songs] == [roads.id, glory.id]
    assert [a.name for a in album_detail.artists] == ["Portishead"]
    assert [s.title for s in artist_detail.songs] == ["Roads", "Glory Box"]
    assert [a.title for a in artist_detail.albums] == ["Dummy"]


def test_missing_primary_entity(db_session):
    assert detail_service.get_playlist_detail(db_session, 1) == NotFound("playlist", "Playlist not found")
    assert detail_service.get_song_detail(db_session, 1) == NotFound("song", "Song not found")
    assert detail_service.get_album_detail(db_session, 1) == NotFound("album", "Album not found")
    assert detail_service.get_artist_detail(db_session, 1) == NotFound("artist", "Artist not found")
