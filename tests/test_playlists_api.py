"""
HTTP tests for /api/v1/playlists - CRUD, membership endpoints and error mapping.
"""
import pytest

API = "/api/v1"


@pytest.fixture
def user(client):
    resp = client.post(f"{API}/users", json={"name": "Alice", "email": "alice@example.com"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def artist(client):
    resp = client.post(f"{API}/artists", json={"name": "Queen"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def new_song(client, artist):
    def _make(title, duration=200):
        resp = client.post(
            f"{API}/songs",
            json={"title": title, "duration": duration, "artist_ids": [artist["id"]]},
        )
        assert resp.status_code == 201
        return resp.json()["id"]
    return _make


@pytest.fixture
def playlist(client, user):
    resp = client.post(
        f"{API}/playlists",
        json={"name": "Favourites", "description": "Best ones", "user_id": user["id"]},
    )
    assert resp.status_code == 201
    return resp.json()


def song_positions(client, playlist_id):
    resp = client.get(f"{API}/playlists/{playlist_id}/songs")
    assert resp.status_code == 200
    return [(entry["id"], entry["position"]) for entry in resp.json()]


class TestPlaylistCrud:
    def test_create_defaults_public(self, playlist, user):
        assert playlist["is_public"] is True
        assert playlist["user_id"] == user["id"]
        assert playlist["description"] == "Best ones"

    def test_create_private_without_description(self, client, user):
        resp = client.post(f"{API}/playlists", json={"name": "Secret", "user_id": user["id"], "is_public": False})
        assert resp.status_code == 201
        assert resp.json()["is_public"] is False
        assert resp.json()["description"] is None

    def test_create_for_unknown_user(self, client):
        resp = client.post(f"{API}/playlists", json={"name": "Orphan", "user_id": 4242})
        assert resp.status_code == 404
        assert resp.json()["detail"] == "User not found"

    def test_list_newest_first(self, client, user, playlist):
        second = client.post(f"{API}/playlists", json={"name": "Later", "user_id": user["id"]}).json()
        ids = [p["id"] for p in client.get(f"{API}/playlists").json()]
        assert ids == [second["id"], playlist["id"]]

    def test_get_detail_with_songs_and_user(self, client, playlist, user, new_song):
        one, two = new_song("One"), new_song("Two")
        client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": one})
        client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": two})

        resp = client.get(f"{API}/playlists/{playlist['id']}")

        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "Favourites"
        assert [(s["id"], s["title"], s["position"]) for s in body["songs"]] == [(one, "One", 1), (two, "Two", 2)]
        assert body["user"]["id"] == user["id"]
        assert body["user"]["email"] == "alice@example.com"

    def test_get_detail_empty_songs(self, client, playlist):
        assert client.get(f"{API}/playlists/{playlist['id']}").json()["songs"] == []

    def test_get_missing(self, client):
        resp = client.get(f"{API}/playlists/99999")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Playlist not found"

    def test_partial_update(self, client, playlist):
        resp = client.put(f"{API}/playlists/{playlist['id']}", json={"is_public": False})
        assert resp.status_code == 200
        assert resp.json()["is_public"] is False
        assert resp.json()["name"] == "Favourites"
        assert resp.json()["description"] == "Best ones"

    def test_update_clears_description(self, client, playlist):
        resp = client.put(f"{API}/playlists/{playlist['id']}", json={"description": None})
        assert resp.json()["description"] is None

    def test_update_rejects_null_name(self, client, playlist):
        resp = client.put(f"{API}/playlists/{playlist['id']}", json={"name": None})
        assert resp.status_code == 400

    def test_delete_cascades_songs(self, client, playlist, new_song):
        client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": new_song("One")})

        assert client.delete(f"{API}/playlists/{playlist['id']}").status_code == 204
        assert client.get(f"{API}/playlists/{playlist['id']}/songs").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete(f"{API}/playlists/99999").status_code == 404

    def test_playlists_by_user(self, client, user, playlist):
        assert [p["id"] for p in client.get(f"{API}/playlists/user/{user['id']}").json()] == [playlist["id"]]
        assert client.get(f"{API}/playlists/user/31337").json() == []
        assert [p["id"] for p in client.get(f"{API}/users/{user['id']}/playlists").json()] == [playlist["id"]]


class TestPlaylistSongs:
    def test_add_with_and_without_position(self, client, playlist, new_song):
        a, b, c, d = (new_song(t) for t in "ABCD")
        url = f"{API}/playlists/{playlist['id']}/songs"

        for song_id in (a, b, c):
            resp = client.post(url, json={"song_id": song_id})
            assert resp.status_code == 201
        resp = client.post(url, json={"song_id": d, "position": 2})

        assert resp.json() == {"message": "Song added to playlist", "position": 2}
        assert song_positions(client, playlist["id"]) == [(a, 1), (d, 2), (b, 3), (c, 4)]

    def test_add_duplicate(self, client, playlist, new_song):
        a, b = new_song("A"), new_song("B")
        url = f"{API}/playlists/{playlist['id']}/songs"
        client.post(url, json={"song_id": a})
        client.post(url, json={"song_id": b})

        resp = client.post(url, json={"song_id": a})

        assert resp.status_code == 409
        assert resp.json()["detail"] == "Song already in playlist"
        assert song_positions(client, playlist["id"]) == [(a, 1), (b, 2)]

    def test_add_to_missing_playlist(self, client, new_song):
        resp = client.post(f"{API}/playlists/99999/songs", json={"song_id": new_song("A")})
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Playlist not found"

    def test_add_missing_song(self, client, playlist):
        resp = client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": 99999})
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Song not found"

    @pytest.mark.parametrize(
        "body",
        [{"song_id": 1, "position": 0}, {"song_id": -1}, {}, {"song_id": 1, "position": 2**63}, {"song_id": 2**63}],
    )
    def test_add_invalid_body(self, client, playlist, body):
        resp = client.post(f"{API}/playlists/{playlist['id']}/songs", json=body)
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Validation failed: ")

    def test_remove_compacts(self, client, playlist, new_song):
        a, b, c = (new_song(t) for t in "ABC")
        url = f"{API}/playlists/{playlist['id']}/songs"
        for song_id in (a, b, c):
            client.post(url, json={"song_id": song_id})

        resp = client.delete(f"{url}/{b}")

        assert resp.status_code == 204
        assert song_positions(client, playlist["id"]) == [(a, 1), (c, 2)]

    def test_remove_not_in_playlist(self, client, playlist, new_song):
        a = new_song("A")
        client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": a})

        resp = client.delete(f"{API}/playlists/{playlist['id']}/songs/999")

        assert resp.status_code == 404
        assert resp.json()["detail"] == "Song not found in playlist"
        assert song_positions(client, playlist["id"]) == [(a, 1)]

    def test_reorder_overwrites(self, client, playlist, new_song):
        a = new_song("A")
        client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": a})

        resp = client.put(f"{API}/playlists/{playlist['id']}/songs/{a}", json={"new_position": 5})

        assert resp.status_code == 200
        assert resp.json() == {"message": "Song position updated", "new_position": 5}
        assert song_positions(client, playlist["id"]) == [(a, 5)]

    def test_reorder_not_in_playlist(self, client, playlist):
        resp = client.put(f"{API}/playlists/{playlist['id']}/songs/99999", json={"new_position": 1})
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Song not found in playlist"

    def test_reorder_rejects_zero(self, client, playlist, new_song):
        a = new_song("A")
        client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": a})
        resp = client.put(f"{API}/playlists/{playlist['id']}/songs/{a}", json={"new_position": 0})
        assert resp.status_code == 400

    def test_reorder_rejects_position_beyond_integer_range(self, client, playlist, new_song):
        a = new_song("A")
        client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": a})

        resp = client.put(f"{API}/playlists/{playlist['id']}/songs/{a}", json={"new_position": 2**63})

        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Validation failed: new_position")
        assert song_positions(client, playlist["id"]) == [(a, 1)]

    @pytest.mark.parametrize("path", ["/playlists/{}", "/playlists/{}/songs", "/songs/{}", "/users/{}/playlists"])
    def test_ids_beyond_integer_range_are_rejected(self, client, path):
        resp = client.get(API + path.format(2**63))
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Validation failed: ")

    def test_deleting_song_compacts_playlists(self, client, playlist, user, new_song):
        other = client.post(f"{API}/playlists", json={"name": "Other", "user_id": user["id"]}).json()
        a, b, c = (new_song(t) for t in "ABC")
        for song_id in (a, b, c):
            client.post(f"{API}/playlists/{playlist['id']}/songs", json={"song_id": song_id})
        client.post(f"{API}/playlists/{other['id']}/songs", json={"song_id": b})
        client.post(f"{API}/playlists/{other['id']}/songs", json={"song_id": c})

        assert client.delete(f"{API}/songs/{b}").status_code == 204

        assert song_positions(client, playlist["id"]) == [(a, 1), (c, 2)]
        assert song_positions(client, other["id"]) == [(c, 1)]
