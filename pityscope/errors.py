"""Exceptions and the per-run diagnostics report."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


class PityscopeError(Exception):
    pass


class ConfigError(PityscopeError):
    pass


class DataDirError(PityscopeError):
    """The data directory is missing or is not a directory."""


class NoDataError(PityscopeError):
    """The run produced no five-star pulls, so there is nothing to bin."""


class RecordError(PityscopeError):
    """A single log record that could not be turned into a draw."""

    def __init__(self, source: str, line: int, reason: str) -> None:
        super().__init__(f"{source}:{line}: {reason}")
        self.source = source
        self.line = line
        self.reason = reason


class MalformedRecordError(RecordError):
    pass


class TruncatedRecordError(RecordError):
    pass


@dataclass
class Diagnostics:
    """Record errors collected while reading, in the order they were hit."""

    errors: List[RecordError] = field(default_factory=list)

    def add(self, error: RecordError) -> None:
        logger.warning("Skipping record %s:%d (%s)", error.source, error.line, error.reason)
        self.errors.append(error)

    @property
    def malformed(self) -> List[RecordError]:
        return [e for e in self.errors if isinstance(e, MalformedRecordError)]

    @property
    def truncated(self) -> List[RecordError]:
        return [e for e in self.errors if isinstance(e, TruncatedRecordError)]

    def __len__(self) -> int:
        return len(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)
