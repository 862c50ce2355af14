from ranttrack.services.lexicon import SYMPTOM_DISPLAY_NAMES


def _categories(body):
    return [s["category"] for s in body["symptoms"]]


def test_extract(client):
    r = client.post("/api/symptoms/extract", json={"text": "I am tired"})
    assert r.status_code == 200
    body = r.json()
    assert body["text"] == "I am tired"
    assert "fatigue" in _categories(body)
    assert r.headers.get("x-trace-id")


def test_extract_uses_stored_vocabulary(client):
    client.post("/api/lemmas", json={"word": "meh", "symptom": "fatigue"})
    r = client.post("/api/symptoms/extract", json={"text": "feeling meh"})
    assert "fatigue" in _categories(r.json())

    r = client.post("/api/symptoms/extract", json={"text": "feeling meh", "use_custom_lemmas": False})
    assert "fatigue" not in _categories(r.json())


def test_request_vocabulary_overrides_stored(client):
    client.post("/api/lemmas", json={"word": "meh", "symptom": "fatigue"})
    r = client.post(
        "/api/symptoms/extract",
        json={"text": "feeling meh", "custom_lemmas": {"meh": "low_mood"}},
    )
    categories = _categories(r.json())
    assert "low_mood" in categories
    assert "fatigue" not in categories


def test_extract_rejects_overlong_text(client):
    r = client.post("/api/symptoms/extract", json={"text": "a" * 5001})
    assert r.status_code == 422
    assert r.json()["code"] == "UNPROCESSABLE_ENTITY"


def test_quick_checkin(client):
    r = client.post("/api/symptoms/quick-checkin", json={"symptoms": ["fatigue", "pem"], "severity": {"pem": "severe"}})
    assert r.status_code == 200
    body = r.json()
    assert [s["category"] for s in body] == ["fatigue", "pem"]
    assert all(s["method"] == "quick_checkin" for s in body)
    assert body[1]["severity"] == "severe"


def test_quick_checkin_rejects_unknown_categories(client):
    r = client.post("/api/symptoms/quick-checkin", json={"symptoms": ["fatigue", "vibes"]})
    assert r.status_code == 400
    assert r.json()["code"] == "BAD_REQUEST"
    r = client.post("/api/symptoms/quick-checkin", json={"symptoms": []})
    assert r.status_code == 422


def test_common_and_categories(client):
    common = client.get("/api/symptoms/common").json()
    assert len(common) == 12
    assert common[0] == {"category": "fatigue", "display_name": "Fatigue"}
    categories = client.get("/api/symptoms/categories").json()
    assert len(categories) == len(SYMPTOM_DISPLAY_NAMES)


def test_segment(client):
    r = client.post(
        "/api/symptoms/segment",
        json={"text": "Monday I crashed. Yesterday my head hurt.", "reference_date": "2024-03-20T12:00:00"},
    )
    assert r.status_code == 200
    monday, yesterday = r.json()
    assert monday["date"] == "2024-03-18T00:00:00"
    assert monday["date_label"] == "Monday, March 18"
    assert monday["explicit"] is True
    assert "pem" in _categories(monday["extraction"])
    assert yesterday["text"] == "my head hurt."
    assert "headache" in _categories(yesterday["extraction"])


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_segment_with_out_of_range_count(client):
    r = client.post(
        "/api/symptoms/segment",
        json={"text": "1000000 days ago I crashed", "reference_date": "2024-03-20T12:00:00"},
    )
    assert r.status_code == 200
    [segment] = r.json()
    assert segment["explicit"] is False
