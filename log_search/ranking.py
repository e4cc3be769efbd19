from __future__ import annotations

import re
from typing import Iterable, List

from log_search.datastore import Record

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def timestamp_value(record: Record) -> int:
    """Timestamp as a signed 64-bit integer.

    0 when it is not a decimal integer; clamped to the int64 range when it
    is one but does not fit.
    """
    text = record.nano_timestamp
    # no surrounding whitespace, underscores or non-ASCII digits
    if not _DECIMAL_RE.fullmatch(text):
        return 0
    try:
        value = int(text)
    except ValueError:
        # past the interpreter's int-string digit limit, far outside int64
        return INT64_MIN if text.startswith("-") else INT64_MAX
    return INT64_MAX if value > INT64_MAX else INT64_MIN if value < INT64_MIN else value


def rank(records: Iterable[Record]) -> List[Record]:
    # sorted() is stable, equal timestamps keep their input order
    return sorted(records, key=timestamp_value, reverse=True)
