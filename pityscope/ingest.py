"""Read exported wish logs, one CSV file per account.

Columns are positional: character, banner id, internal id, rarity, item
type, timestamp. The first line is a header.
"""
from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Sequence

from .errors import DataDirError, Diagnostics, MalformedRecordError, RecordError, TruncatedRecordError
from .tracker import AccountLog, RawDraw

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FIELD_COUNT = 6
MIN_RARITY = 3
MAX_RARITY = 5
REPLACEMENT_CHAR = "\ufffd"


def iter_account_files(data_dir: Path) -> List[Path]:
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DataDirError(f"data directory {data_dir} does not exist or is not a directory")
    return sorted(p for p in data_dir.glob("*.csv") if p.is_file())


def parse_record(fields: Sequence[str], source: str, line: int) -> RawDraw:
    if len(fields) < FIELD_COUNT:
        raise TruncatedRecordError(source, line, f"expected {FIELD_COUNT} fields, got {len(fields)}")
    if any(REPLACEMENT_CHAR in f for f in fields):
        raise MalformedRecordError(source, line, "undecodable bytes")
    character, banner_id, _, rarity, _, timestamp = (f.strip() for f in fields[:FIELD_COUNT])

    try:
        rarity_value = int(rarity)
    except ValueError:
        raise MalformedRecordError(source, line, f"bad rarity {rarity!r}") from None
    if not MIN_RARITY <= rarity_value <= MAX_RARITY:
        raise MalformedRecordError(source, line, f"rarity {rarity_value} out of range")
    try:
        when = datetime.strptime(timestamp, TIMESTAMP_FORMAT)
    except ValueError:
        raise MalformedRecordError(source, line, f"bad timestamp {timestamp!r}") from None
    return RawDraw(character, banner_id, rarity_value, when)


def read_account(path: Path, diagnostics: Diagnostics) -> AccountLog:
    path = Path(path)
    account = AccountLog(path.stem)
    # Undecodable bytes become U+FFFD and are reported per record.
    with path.open(newline="", encoding="utf-8-sig", errors="replace") as f:
        reader = csv.reader(f)
        try:
            next(reader, None)
        except csv.Error as exc:
            diagnostics.add(MalformedRecordError(path.name, reader.line_num, str(exc)))
        while True:
            try:
                fields = next(reader)
            except StopIteration:
                break
            except csv.Error as exc:
                diagnostics.add(MalformedRecordError(path.name, reader.line_num, str(exc)))
                continue
            if not any(x.strip() for x in fields):
                continue
            try:
                account.draws.append(parse_record(fields, path.name, reader.line_num))
            except RecordError as exc:
                diagnostics.add(exc)
    return account


def read_accounts(data_dir: Path, diagnostics: Diagnostics) -> Iterator[AccountLog]:
    for path in iter_account_files(data_dir):
        logger.info("Reading file %s", path.name)
        yield read_account(path, diagnostics)
