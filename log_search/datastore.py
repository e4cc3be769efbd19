from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class Record:
    event_id: str
    message: str
    nano_timestamp: str

    def indexable_text(self) -> str:
        return f"{self.message} {self.event_id} {self.nano_timestamp}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "EventId": self.event_id,
            "Message": self.message,
            "NanoTimeStamp": self.nano_timestamp,
        }


def as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class RecordStore:
    """Append-only in-memory record list.

    Layout:
      records[p] -> record appended as position p
    Positions start at 0 and are never reused or reordered.
    """

    def __init__(self) -> None:
        self._records: List[Record] = []

    def append(self, record: Record) -> int:
        # returns the position
        position = len(self._records)
        self._records.append(record)
        return position

    def get(self, position: int) -> Record:
        if position < 0 or position >= len(self._records):
            raise IndexError(f"position {position} out of range (size={len(self._records)})")
        return self._records[position]

    def __len__(self) -> int:
        return len(self._records)
