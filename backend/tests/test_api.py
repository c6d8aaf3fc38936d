"""Tests for the HTTP API driving the session ledger."""

import json


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_seeded_cards_listed(client):
    data = client.get("/api/cards").json()
    assert data["count"] == 2
    assert data["cards"][0] == {"id": "s1", "boxNumber": 0, "front": "uno"}


def test_get_card_and_missing(client):
    assert client.get("/api/cards/s2").json()["boxNumber"] == 2

    response = client.get("/api/cards/ghost")
    assert response.status_code == 404
    assert response.json()["detail"]["error"]["code"] == "CARD_NOT_FOUND"


def test_add_card(client):
    response = client.post("/api/cards", json={"id": "n1", "boxNumber": 1, "front": "tres"})
    assert response.status_code == 201
    assert response.json() == {"id": "n1", "boxNumber": 1, "front": "tres"}
    assert client.get("/api/cards").json()["count"] == 3


def test_get_card_with_slash_in_id(client):
    client.post("/api/cards", json={"id": "fr/chat", "boxNumber": 1})

    response = client.get("/api/cards/fr/chat")
    assert response.status_code == 200
    assert response.json() == {"id": "fr/chat", "boxNumber": 1}


def test_add_card_rejects_bad_shape(client):
    response = client.post("/api/cards", json={"id": "n1"})
    assert response.status_code == 422


def test_box_counts(client):
    boxes = client.get("/api/cards/boxes").json()["boxes"]
    assert boxes == [{"box": 0, "count": 1}, {"box": 2, "count": 1}]


def test_box_counts_after_out_of_range_answers(client):
    client.post("/api/session/start")
    client.post("/api/session/answer", json={"card_id": "s1", "new_box_id": -1})
    client.post("/api/session/answer", json={"card_id": "s2", "new_box_id": 5_000_000})
    client.post("/api/session/end")

    boxes = client.get("/api/cards/boxes").json()["boxes"]
    assert boxes == [{"box": -1, "count": 1}, {"box": 5_000_000, "count": 1}]

    exported = client.get("/api/cards/export").text
    assert client.post("/api/cards/import", content=exported).status_code == 200
    assert client.get("/api/cards/s1").json()["boxNumber"] == -1


def test_export_then_import_round_trip(client):
    exported = client.get("/api/cards/export")
    assert exported.status_code == 200
    assert exported.text.startswith("[\n    {")

    response = client.post("/api/cards/import", content=exported.text)
    assert response.json() == {"success": True, "card_count": 2}
    assert client.get("/api/cards/export").text == exported.text


def test_import_replaces_registry(client):
    payload = json.dumps([{"id": "x", "boxNumber": 4}])
    response = client.post("/api/cards/import", content=payload)

    assert response.status_code == 200
    assert [c["id"] for c in client.get("/api/cards").json()["cards"]] == ["x"]


def test_import_failure_keeps_registry(client):
    response = client.post("/api/cards/import", content="{not json")

    assert response.status_code == 400
    assert response.json()["detail"]["error"]["code"] == "IMPORT_INVALID"
    assert client.get("/api/cards").json()["count"] == 2


def test_session_answer_and_end(client):
    assert client.post("/api/session/start").json() == {"in_session": True, "pending_count": 0}

    client.post("/api/session/answer", json={"card_id": "s1", "new_box_id": 1})
    client.post("/api/session/answer", json={"card_id": "s2", "new_box_id": 2})
    client.post("/api/session/answer", json={"card_id": "ghost", "new_box_id": 3})

    current = client.get("/api/session/current").json()
    assert current["pending_count"] == 3
    assert current["pending_answers"][2] == {"card_id": "ghost", "new_box_id": 3}
    assert client.get("/api/cards/s1").json()["boxNumber"] == 0

    result = client.post("/api/session/end").json()
    assert result["in_session"] is False
    assert (result["applied"], result["unchanged"], result["missing"], result["total"]) == (1, 1, 1, 3)
    assert [d["kind"] for d in result["diagnostics"]] == ["card_unchanged", "card_not_found"]

    assert client.get("/api/cards/s1").json()["boxNumber"] == 1
    assert client.get("/api/session/current").json()["pending_count"] == 0


def test_restart_discards_buffer(client):
    client.post("/api/session/start")
    client.post("/api/session/answer", json={"card_id": "s1", "new_box_id": 2})
    client.post("/api/session/start")

    result = client.post("/api/session/end").json()
    assert result["total"] == 0
    assert client.get("/api/cards/s1").json()["boxNumber"] == 0


def test_grade_uses_projected_box(client):
    client.post("/api/session/start")

    first = client.post("/api/session/grade", json={"card_id": "s2", "correct": True}).json()
    assert first["new_box_id"] == 3

    # LEITNER_MAX_BOX=3 in the fixture
    second = client.post("/api/session/grade", json={"card_id": "s2", "correct": True}).json()
    assert second["new_box_id"] == 3

    wrong = client.post("/api/session/grade", json={"card_id": "s1", "correct": False}).json()
    assert wrong["new_box_id"] == 0
    assert wrong["pending_count"] == 3

    result = client.post("/api/session/end").json()
    assert (result["applied"], result["unchanged"]) == (1, 2)
    assert client.get("/api/cards/s2").json()["boxNumber"] == 3


def test_grade_unknown_card(client):
    client.post("/api/session/start")
    response = client.post("/api/session/grade", json={"card_id": "ghost", "correct": True})

    assert response.status_code == 404
    assert client.get("/api/session/current").json()["pending_count"] == 0
