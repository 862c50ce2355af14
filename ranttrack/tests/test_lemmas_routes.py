def test_crud_roundtrip(client):
    r = client.post("/api/lemmas", json={"word": "  Brain Static ", "symptom": "brain_fog"})
    assert r.status_code == 201
    created = r.json()
    assert created["word"] == "brain static"
    lemma_id = created["id"]

    listed = client.get("/api/lemmas").json()
    assert [l["id"] for l in listed] == [lemma_id]
    assert client.get(f"/api/lemmas/{lemma_id}").json()["symptom"] == "brain_fog"

    r = client.patch(f"/api/lemmas/{lemma_id}", json={"symptom": "dizziness"})
    assert r.status_code == 200
    assert r.json()["symptom"] == "dizziness"
    assert r.json()["word"] == "brain static"

    assert client.delete(f"/api/lemmas/{lemma_id}").status_code == 204
    assert client.get(f"/api/lemmas/{lemma_id}").status_code == 404


def test_duplicate_is_conflict(client):
    client.post("/api/lemmas", json={"word": "meh", "symptom": "fatigue"})
    r = client.post("/api/lemmas", json={"word": "MEH", "symptom": "low_mood"})
    assert r.status_code == 409
    assert r.json()["code"] == "CONFLICT"

    other = client.post("/api/lemmas", json={"word": "blah", "symptom": "low_mood"}).json()
    r = client.patch(f"/api/lemmas/{other['id']}", json={"word": "meh"})
    assert r.status_code == 409


def test_blank_word_is_bad_request(client):
    r = client.post("/api/lemmas", json={"word": "   ", "symptom": "fatigue"})
    assert r.status_code == 400
    assert r.json()["code"] == "BAD_REQUEST"


def test_unknown_id_is_not_found(client):
    for method in ("get", "delete"):
        r = getattr(client, method)("/api/lemmas/nope")
        assert r.status_code == 404
        assert r.json()["code"] == "NOT_FOUND"
    r = client.patch("/api/lemmas/nope", json={"symptom": "fatigue"})
    assert r.status_code == 404
