"""Reading and writing a task vault as CSV."""

from __future__ import annotations

import csv
import re
from datetime import datetime, timedelta, timezone
from typing import Iterable, TextIO

from tasklist.datalayer import MapTaskVault, Task

_HEADER = ("ID", "Description", "CreatedAt", "IsComplete")
_FIELD_COUNT = len(_HEADER)

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_RFC3339_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(Z|[+-][0-9]{2}:[0-9]{2})"
)


def csv_read(stream: TextIO) -> MapTaskVault:
    """Load a vault from CSV text; the first record is a header and is skipped.

    Raises ValueError for malformed records and passes on errors of the stream.
    """
    records = [record for record in csv.reader(stream, strict=True) if record]
    for number, record in enumerate(records, start=1):
        if len(record) != _FIELD_COUNT:
            raise ValueError(
                f"record on line {number}: wrong number of fields "
                f"(expected {_FIELD_COUNT}, got {len(record)})"
            )
    db = {task.id: task for task in map(_record_to_task, records[1:])}
    return MapTaskVault(db=db, last_id=max(db, default=0))


def csv_write(vault: MapTaskVault, stream: TextIO) -> None:
    """Write the header and every task of the vault, ordered by id."""
    stream.write(_format_record(_HEADER))
    for task in vault.list():
        stream.write(_format_record(_task_to_record(task)))


def _task_to_record(task: Task) -> tuple[str, str, str, str]:
    return (
        str(task.id),
        task.description,
        _format_time(task.created_at),
        "true" if task.is_complete else "false",
    )


def _record_to_task(record: list[str]) -> Task:
    raw_id, description, raw_time, raw_complete = record
    return Task(
        id=_parse_id(raw_id),
        description=description,
        created_at=_parse_time(raw_time),
        is_complete=_parse_bool(raw_complete),
    )


def _parse_id(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid task id: {text!r}")
    value = int(text)
    if value < 0:
        raise ValueError(f"task id cannot be negative: {text!r}")
    return value


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def _parse_time(text: str) -> datetime:
    match = _RFC3339_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    microsecond = int((fraction or "").ljust(6, "0")[:6])
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            microsecond, tzinfo=tz,
        )
    except ValueError as exc:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}") from exc


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    stamp = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    offset = moment.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60 if offset >= timedelta(0) else -(
        int(-offset.total_seconds()) // 60
    )
    if total_minutes == 0:
        return stamp + "Z"
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{stamp}{sign}{hours:02d}:{minutes:02d}"


def _needs_quotes(text: str) -> bool:
    if text == "":
        return False
    if text == r"\.":
        return True
    if any(ch in text for ch in ',"\r\n'):
        return True
    return text[0].isspace()


def _format_field(text: str) -> str:
    if _needs_quotes(text):
        return '"' + text.replace('"', '""') + '"'
    return text


def _format_record(fields: Iterable[str]) -> str:
    return ",".join(_format_field(text) for text in fields) + "\n"