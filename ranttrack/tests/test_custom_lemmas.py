import pytest
from sqlalchemy.exc import OperationalError

from ranttrack.schemas.lemmas import CustomLemmaOut
from ranttrack.services import custom_lemmas as store


def test_add_normalizes_word_and_symptom(db_session):
    row = store.add_custom_lemma(db_session, "  MeH  ", " fatigue ")
    assert row.id
    assert row.word == "meh"
    assert row.symptom == "fatigue"
    assert store.custom_lemma_exists(db_session, "MEH")


def test_add_rejects_empty_and_duplicates(db_session):
    with pytest.raises(store.CustomLemmaError):
        store.add_custom_lemma(db_session, "   ", "fatigue")
    with pytest.raises(ValueError):
        store.add_custom_lemma(db_session, "meh", "")
    store.add_custom_lemma(db_session, "meh", "fatigue")
    with pytest.raises(store.DuplicateCustomLemmaError):
        store.add_custom_lemma(db_session, "Meh", "low_mood")


def test_update_get_delete(db_session):
    row = store.add_custom_lemma(db_session, "brain static", "brain_fog")
    store.add_custom_lemma(db_session, "meh", "fatigue")

    updated = store.update_custom_lemma(db_session, row.id, symptom="dizziness")
    assert updated.word == "brain static"
    assert updated.symptom == "dizziness"
    with pytest.raises(store.DuplicateCustomLemmaError):
        store.update_custom_lemma(db_session, row.id, word="MEH")
    with pytest.raises(store.CustomLemmaError):
        store.update_custom_lemma(db_session, row.id, word="  ")

    assert store.get_custom_lemma(db_session, row.id).symptom == "dizziness"
    store.delete_custom_lemma(db_session, row.id)
    with pytest.raises(store.CustomLemmaNotFoundError):
        store.get_custom_lemma(db_session, row.id)
    with pytest.raises(store.CustomLemmaNotFoundError):
        store.delete_custom_lemma(db_session, "missing")


def test_list_and_map(db_session):
    store.add_custom_lemma(db_session, "meh", "fatigue")
    store.add_custom_lemma(db_session, "brain static", "brain_fog")
    assert {r.word for r in store.list_custom_lemmas(db_session)} == {"meh", "brain static"}
    assert store.get_custom_lemma_map(db_session) == {"meh": "fatigue", "brain static": "brain_fog"}


def test_map_falls_back_to_empty_on_storage_error(db_session, monkeypatch, caplog):
    def broken(*_args, **_kwargs):
        raise OperationalError("SELECT", {}, Exception("db down"))

    monkeypatch.setattr(db_session, "query", broken)
    with caplog.at_level("WARNING", logger="ranttrack"):
        assert store.get_custom_lemma_map(db_session) == {}
    assert any(r.levelname == "WARNING" for r in caplog.records)


def test_rows_validate_into_out_schema(db_session):
    row = store.add_custom_lemma(db_session, "wonky", "dizziness")
    out = CustomLemmaOut.model_validate(row)
    assert out.id == row.id
    assert out.word == "wonky"
    assert out.symptom == "dizziness"
