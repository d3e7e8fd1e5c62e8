"""
Tests for mood, history and statistics endpoints.
"""


def check_in(client, headers, mood_type="Happy", **extra):
    return client.post("/api/mood", json={"mood_type": mood_type, **extra}, headers=headers)


def test_check_in_and_read_today(client, auth_headers, mood_types):
    response = check_in(client, auth_headers, reason="Work", note="sunny")
    assert response.status_code == 201
    body = response.json()
    assert body["date"] == "2024-05-01"
    assert body["mood_type"] == "Happy"
    assert body["reason"] == "Work"

    today = client.get("/api/mood", headers=auth_headers)
    assert today.status_code == 200
    assert today.json()["id"] == body["id"]


def test_duplicate_check_in_conflicts(client, auth_headers, mood_types):
    assert check_in(client, auth_headers).status_code == 201

    response = check_in(client, auth_headers, mood_type="Sad")
    assert response.status_code == 409
    assert response.json()["error"] == "conflict"

    streak = client.get("/api/users/streak", headers=auth_headers).json()
    assert streak == {"current": 1, "longest": 1}


def test_check_in_unknown_mood_type(client, auth_headers, mood_types):
    response = check_in(client, auth_headers, mood_type="Elated")
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_check_in_requires_mood_type(client, auth_headers, mood_types):
    response = client.post("/api/mood", json={"note": "no mood"}, headers=auth_headers)
    assert response.status_code == 400


def test_get_today_without_entry(client, auth_headers):
    response = client.get("/api/mood", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


def test_patch_today(client, auth_headers, mood_types):
    check_in(client, auth_headers, reason="Family", note="before")

    response = client.patch("/api/mood", json={"note": "x"}, headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["note"] == "x"
    assert body["mood_type"] == "Happy"
    assert body["reason"] == "Family"


def test_patch_ignores_protected_fields(client, auth_headers, mood_types):
    created = check_in(client, auth_headers).json()

    response = client.patch(
        "/api/mood",
        json={"note": "y", "user_id": 999, "date": "2020-01-01"},
        headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == created["user_id"]
    assert body["date"] == created["date"]


def test_patch_without_entry(client, auth_headers, mood_types):
    response = client.patch("/api/mood", json={"note": "x"}, headers=auth_headers)
    assert response.status_code == 404


def test_history_and_day_lookup(client, auth_headers, mood_types, calendar):
    for mood in ("Happy", "Sad", "Happy"):
        assert check_in(client, auth_headers, mood_type=mood).status_code == 201
        calendar.advance()

    history = client.get("/api/moods", headers=auth_headers).json()
    assert [m["date"] for m in history] == ["2024-05-03", "2024-05-02", "2024-05-01"]

    happy = client.get("/api/moods", params={"mood_type": "Happy"}, headers=auth_headers).json()
    assert [m["date"] for m in happy] == ["2024-05-03", "2024-05-01"]

    ranged = client.get(
        "/api/moods", params={"start": "2024-05-02", "end": "2024-05-03"}, headers=auth_headers
    ).json()
    assert len(ranged) == 2

    day = client.get("/api/moods/2024-05-02", headers=auth_headers)
    assert day.status_code == 200
    assert day.json()["mood_type"] == "Sad"

    assert client.get("/api/moods/2024-04-30", headers=auth_headers).status_code == 404


def test_history_rejects_inverted_range(client, auth_headers):
    response = client.get(
        "/api/moods", params={"start": "2024-05-02", "end": "2024-05-01"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_malformed_day_is_validation_error(client, auth_headers):
    response = client.get("/api/moods/not-a-date", headers=auth_headers)
    assert response.status_code == 400


def test_stats(client, auth_headers, mood_types, calendar):
    for mood in ("Happy", "Sad", "Happy"):
        check_in(client, auth_headers, mood_type=mood)
        calendar.advance()

    response = client.get(
        "/api/stats/moods", params={"start": "2024-05-01", "end": "2024-05-03"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json() == {
        "days": {"2024-05-01": "Happy", "2024-05-02": "Sad", "2024-05-03": "Happy"},
        "counts": {"Happy": 2, "Sad": 1},
    }


def test_stats_requires_range(client, auth_headers):
    response = client.get("/api/stats/moods", params={"start": "2024-05-01"}, headers=auth_headers)
    assert response.status_code == 400
