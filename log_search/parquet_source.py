from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import pyarrow as pa
import pyarrow.parquet as pq

from log_search.datastore import Record, as_text
from log_search.errors import NoSourcesError, SourceReadError
from log_search.logger import logs
from log_search.search_engine import SearchEngine

DEFAULT_COLUMNS = ("EventId", "Message", "NanoTimeStamp")


def find_parquet_files(directory: Path | str) -> List[Path]:
    """Regular files directly under ``directory`` named ``*.parquet`` (any case), sorted."""
    root = Path(directory)
    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise SourceReadError(f"cannot list {root}: {e}") from e
    files = [p for p in entries if p.is_file() and p.name.lower().endswith(".parquet")]
    return sorted(files, key=lambda p: p.name)


def read_parquet_file(path: Path | str, columns: Sequence[str] = DEFAULT_COLUMNS) -> List[Record]:
    path = Path(path)
    event_col, message_col, ts_col = columns
    try:
        pf = pq.ParquetFile(path)
        for schema_field in pf.schema_arrow:
            logs.debug(f"Schema field in {path}: {schema_field.name} (Type: {schema_field.type})")

        missing = [c for c in columns if c not in pf.schema_arrow.names]
        if missing:
            raise SourceReadError(f"{path}: missing column(s) {', '.join(missing)}")

        table: pa.Table = pf.read(columns=list(columns))
    except SourceReadError:
        raise
    except (OSError, pa.ArrowException) as e:
        raise SourceReadError(f"{path}: {e}") from e

    event_ids = table.column(event_col).to_pylist()
    messages = table.column(message_col).to_pylist()
    timestamps = table.column(ts_col).to_pylist()
    return [
        Record(event_id=as_text(e), message=as_text(m), nano_timestamp=as_text(t))
        for e, m, t in zip(event_ids, messages, timestamps)
    ]


@logs.catch("loading Parquet sources failed")
def load_directory(engine: SearchEngine, directory: Path | str, columns: Sequence[str] = DEFAULT_COLUMNS) -> int:
    """Ingest every Parquet file under ``directory``; returns the number of records loaded.

    A file that fails to read is logged and skipped. No Parquet files at all
    raises NoSourcesError.
    """
    files = find_parquet_files(directory)
    if not files:
        raise NoSourcesError(f"No Parquet files found in directory {directory}")

    loaded = 0
    for file in files:
        logs.info(f"Loading file: {file}")
        try:
            records = read_parquet_file(file, columns)
        except SourceReadError as e:
            logs.warning(f"Failed to read Parquet file {file}: {e}")
            continue
        engine.ingest(records)
        loaded += len(records)

    logs.info(f"Loaded {loaded} records")
    return loaded
