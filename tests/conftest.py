# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq
import pytest
from loguru import logger

from log_search.datastore import Record
from log_search.search_engine import SearchEngine

RECORD_SCHEMA = pa.schema([
    ("EventId", pa.string()),
    ("Message", pa.string()),
    ("NanoTimeStamp", pa.string()),
])


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def disk_records() -> list[Record]:
    return [
        Record(event_id="e1", message="disk failure", nano_timestamp="100"),
        Record(event_id="e2", message="disk ok", nano_timestamp="200"),
    ]


@pytest.fixture
def engine(disk_records) -> SearchEngine:
    se = SearchEngine()
    se.ingest(disk_records)
    return se


@pytest.fixture
def write_parquet():
    """
    Factory: write rows (dicts) to a Parquet file, default record schema.
    """

    def _write(path: Path, rows: list[dict], schema: pa.Schema | None = RECORD_SCHEMA) -> Path:
        table = pa.Table.from_pylist(rows, schema=schema)
        pq.write_table(table, path)
        return path

    return _write


@pytest.fixture
def parquet_dir(tmp_path: Path, write_parquet) -> Path:
    """
    /logs/
        a.parquet   e1, e2
        b.parquet   e3
        notes.txt   (ignored)
    """
    base = tmp_path / "logs"
    base.mkdir()
    write_parquet(base / "a.parquet", [
        {"EventId": "e1", "Message": "disk failure", "NanoTimeStamp": "100"},
        {"EventId": "e2", "Message": "disk ok", "NanoTimeStamp": "200"},
    ])
    write_parquet(base / "b.parquet", [
        {"EventId": "e3", "Message": "network down", "NanoTimeStamp": "300"},
    ])
    (base / "notes.txt").write_text("not a parquet file", encoding="utf-8")
    return base
