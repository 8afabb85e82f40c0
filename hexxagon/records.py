"""Leaderboard of the best scores won against the computer."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

RECORDS_FILE = "records.bin"
MAX_RECORDS = 10
_EPOCH = date(1970, 1, 1)
_LAYOUT = struct.Struct("<IB")


@dataclass(frozen=True)
class Record:
    """A leaderboard entry: days since the Unix epoch and the score reached."""

    days: int
    score: int

    def date(self):
        """Calendar date of the record."""
        return _EPOCH + timedelta(days=self.days)

    def __str__(self):
        day = self.date()
        return f"{day.year}/{day.month}/{day.day}: {self.score}"


def read_records(path=RECORDS_FILE):
    """Return up to the stored maximum of records, best first; none if no file."""
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        return []
    usable = len(data) - len(data) % _LAYOUT.size
    records = [Record(days, score) for days, score in _LAYOUT.iter_unpack(data[:usable])]
    return records[:MAX_RECORDS]


def _write_records(records, path):
    Path(path).write_bytes(b"".join(_LAYOUT.pack(r.days, r.score) for r in records))


def add_score(score, path=RECORDS_FILE, today=None):
    """Insert a score into the leaderboard; return False if it did not make it."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    records = read_records(path)
    if len(records) >= MAX_RECORDS:
        if score <= records[-1].score:
            return False
        records = records[:MAX_RECORDS - 1]

    position = len(records)
    while position and records[position - 1].score < score:
        position -= 1
    records.insert(position, Record((today - _EPOCH).days, score))
    _write_records(records, path)
    return True