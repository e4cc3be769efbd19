from __future__ import annotations

import pytest

from log_search.datastore import Record
from log_search.errors import EngineSealedError
from log_search.search_engine import SearchEngine, SearchResponse


def _ids(records) -> list[str]:
    return [r.event_id for r in records]


# -----------------------------------------------------------------------------
# query
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("text", ["", "   ", "\t"])
def test_blank_query_is_empty(engine, text):
    assert engine.query(text) == []
    resp = engine.search(text)
    assert resp.count == 0
    assert resp.to_dict()["results"] == []


def test_end_to_end_disk_scenario(engine):
    assert _ids(engine.query("disk")) == ["e2", "e1"]
    assert _ids(engine.query("disk failure")) == ["e1"]
    assert engine.query("network") == []


def test_query_is_case_insensitive(engine):
    assert _ids(engine.query("DISK Failure")) == ["e1"]


def test_and_with_unindexed_term_is_empty(engine):
    assert _ids(engine.query("disk")) != []
    assert engine.query("disk network") == []
    assert engine.query("network disk") == []


def test_and_semantics_exact_match():
    se = SearchEngine()
    se.ingest([
        Record("a", "alpha beta", "1"),
        Record("b", "alpha gamma", "2"),
        Record("c", "beta gamma", "3"),
    ])
    assert _ids(se.query("alpha beta")) == ["a"]
    assert _ids(se.query("beta alpha")) == ["a"]
    assert _ids(se.query("alpha beta gamma")) == []


def test_event_id_and_timestamp_are_searchable(engine):
    assert _ids(engine.query("e1")) == ["e1"]
    assert _ids(engine.query("200")) == ["e2"]
    assert _ids(engine.query("disk e2")) == ["e2"]


def test_duplicate_terms_in_record_match_once():
    se = SearchEngine()
    se.ingest([Record("e1", "error error ERROR", "10")])

    assert se.index.postings("error") == [0]
    assert _ids(se.query("error")) == ["e1"]
    assert _ids(se.query("error error")) == ["e1"]


def test_term_shared_by_message_and_id_indexed_once():
    se = SearchEngine()
    se.ingest([Record("disk", "disk full", "1")])
    assert se.index.postings("disk") == [0]


def test_non_numeric_timestamp_ranks_last():
    se = SearchEngine()
    se.ingest([
        Record("bad", "boot", "not-a-number"),
        Record("old", "boot", "100"),
        Record("new", "boot", "200"),
    ])
    assert _ids(se.query("boot")) == ["new", "old", "bad"]


def test_punctuation_is_part_of_term():
    se = SearchEngine()
    se.ingest([Record("e1", "disk: failed", "1")])
    assert se.query("disk") == []
    assert _ids(se.query("disk:")) == ["e1"]


# -----------------------------------------------------------------------------
# ingest
# -----------------------------------------------------------------------------
def test_positions_of_later_batch_exceed_earlier(disk_records):
    se = SearchEngine()
    se.ingest(disk_records)
    first = len(se.store)
    se.ingest([Record("e3", "disk slow", "300")])

    assert se.index.postings("disk") == [0, 1, 2]
    assert se.index.postings("slow") == [first]
    assert se.store.get(0) is disk_records[0]
    assert se.store.get(1) is disk_records[1]
    assert _ids(se.query("disk")) == ["e3", "e2", "e1"]


def test_empty_batch_is_noop():
    se = SearchEngine()
    se.ingest([])
    assert len(se) == 0
    assert se.query("anything") == []


def test_ingest_accepts_generator():
    se = SearchEngine()
    se.ingest(Record(f"e{i}", "tick", str(i)) for i in range(3))
    assert _ids(se.query("tick")) == ["e2", "e1", "e0"]


def test_sealed_engine_rejects_ingest(engine):
    engine.seal()
    assert engine.sealed
    with pytest.raises(EngineSealedError):
        engine.ingest([Record("e3", "late", "1")])
    assert len(engine) == 2
    assert _ids(engine.query("disk")) == ["e2", "e1"]


def test_engines_are_independent(disk_records):
    a = SearchEngine()
    b = SearchEngine()
    a.ingest(disk_records)

    assert len(b) == 0
    assert b.query("disk") == []


# -----------------------------------------------------------------------------
# search response
# -----------------------------------------------------------------------------
def test_search_response_shape(engine):
    resp = engine.search("disk")

    assert isinstance(resp, SearchResponse)
    payload = resp.to_dict()
    assert set(payload) == {"results", "count", "time_ms"}
    assert payload["count"] == 2
    assert payload["results"][0] == {"EventId": "e2", "Message": "disk ok", "NanoTimeStamp": "200"}
    assert isinstance(payload["time_ms"], int)
    assert payload["time_ms"] >= 0


def test_time_ms_truncates():
    assert SearchResponse(elapsed_ms=3.9).time_ms == 3
    assert SearchResponse().time_ms == 0
