"""Errors raised by the ledger collaborators.

The timeline deriver itself never raises for well-formed input; missing data
is reported as ``None`` growth instead.
"""
from __future__ import annotations


class InvalidRecordError(ValueError):
    """A ledger record failed validation at write time."""


class RecordNotFoundError(KeyError):
    """No ledger record carries the requested id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(record_id)
        self.record_id = record_id

    def __str__(self) -> str:
        return f"No record with id {self.record_id!r}"


class LedgerStorageError(RuntimeError):
    """The persisted ledger could not be read or written."""
