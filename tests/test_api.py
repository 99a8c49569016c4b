from srordle import create_app
from srordle.config import TestingConfig
from srordle.services.game_service import get_game_service


def test_get_game(client) -> None:
    response = client.post("/api/srordle", json={"tzOffset": 0})
    assert response.status_code == 200
    game = response.get_json()["Game"]
    assert game["TargetWord"] == ""
    assert game["FullAttempts"] == 2
    assert game["Shape"][1] == [True, True, True, True, False, True, True]


def test_get_game_requires_post(client) -> None:
    assert client.get("/api/srordle").status_code == 405


def test_get_game_bad_body(client) -> None:
    response = client.post("/api/srordle", data="not json", content_type="application/json")
    assert response.status_code == 400


def test_winning_guess(client) -> None:
    response = client.post("/api/guess", json={"guess": "telling", "tzOffset": 0, "guessIndex": 0})
    assert response.status_code == 200
    body = response.get_json()
    assert body["Won"] is True
    assert body["Words"] == ["telling"]
    assert all(a["Status"] == 3 for a in body["Answer"])


def test_shaped_guess(client) -> None:
    response = client.post("/api/guess", json={"guess": "catdog", "tzOffset": 0, "guessIndex": 2})
    body = response.get_json()
    assert body["Words"] == ["cat", "dog"]
    assert body["Won"] is False
    assert body["Answer"][3] == {"Letter": "", "Status": 4}


def test_wrong_shape_message(client) -> None:
    response = client.post("/api/guess", json={"guess": "cat", "tzOffset": 0, "guessIndex": 2})
    assert response.status_code == 200
    assert response.get_json() == {"Error": "Your guess wasn't the right shape"}


def test_unknown_word_message(client) -> None:
    response = client.post("/api/guess", json={"guess": "zzzzzzz", "tzOffset": 0, "useFull": True})
    assert response.get_json() == {"Error": "ZZZZZZZ isn't a word"}


def test_invalid_characters_are_a_client_error(client) -> None:
    response = client.post("/api/guess", json={"guess": "tell1ng", "tzOffset": 0, "useFull": True})
    assert response.status_code == 400
    assert "Error" in response.get_json()


def test_missing_guess(client) -> None:
    response = client.post("/api/guess", json={"tzOffset": 0})
    assert response.status_code == 400


def test_bad_tz_offset(client) -> None:
    response = client.post("/api/guess", json={"guess": "telling", "tzOffset": "utc"})
    assert response.status_code == 400


def test_no_game_for_the_day(client) -> None:
    get_game_service().store.collection.documents.clear()
    response = client.post("/api/guess", json={"guess": "telling", "tzOffset": 0})
    assert response.status_code == 404
    assert client.post("/api/srordle", json={"tzOffset": 0}).status_code == 404


def test_out_of_range_tz_offset(client) -> None:
    response = client.post("/api/srordle", json={"tzOffset": 50 * 3600})
    assert response.status_code == 400


def test_health(client) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "healthy"
    assert body["dictionary_size"] == 16


def test_static_files_served_when_enabled(tmp_path) -> None:
    (tmp_path / "index.html").write_text("<html>srordle</html>", encoding="utf-8")

    class LocalConfig(TestingConfig):
        SERVE_STATIC = True
        STATIC_DIR = str(tmp_path)

    client = create_app(LocalConfig).test_client()
    assert b"srordle" in client.get("/").data
    assert client.get("/secrets.txt").status_code == 404


def test_static_files_not_served_by_default() -> None:
    client = create_app(TestingConfig).test_client()
    assert client.get("/").status_code == 404
