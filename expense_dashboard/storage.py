"""Expense record storage backed by a single JSON blob.

The store keeps the ordered record collection in memory and mirrors the
complete snapshot to disk after every mutation.  Loading is forgiving: a
missing or unparseable blob yields an empty store, and
individual malformed entries are skipped.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from .config import STORAGE_KEY, STORAGE_PATH
from .models import ExpenseDraft, ExpenseRecord, InvalidExpenseError

logger = logging.getLogger(__name__)


class ExpenseStore:
    """Handles the expense collection and its persisted snapshot."""

    def __init__(self, path: Optional[Path] = None, key: str = STORAGE_KEY):
        """Initialize the store.

        Args:
            path: Optional custom blob location. Defaults to STORAGE_PATH from config.
            key: Name under which the record list is stored in the blob.
        """
        self.path = Path(path) if path is not None else STORAGE_PATH
        self.key = key
        self._records: Tuple[ExpenseRecord, ...] = ()

    @property
    def records(self) -> Tuple[ExpenseRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExpenseRecord]:
        return iter(self._records)

    def get(self, record_id: str) -> Optional[ExpenseRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def load(self) -> Tuple[ExpenseRecord, ...]:
        """Load the persisted snapshot into memory.

        Returns:
            The loaded records, newest-created first as they were saved.

        Note:
            Never raises. A read or parse failure leaves the store empty;
            entries that fail validation or repeat an earlier id are skipped.
        """
        self._records = self._read_snapshot()
        logger.debug("Loaded %d expenses from %s", len(self._records), self.path)
        return self._records

    def _read_snapshot(self) -> Tuple[ExpenseRecord, ...]:
        if not self.path.exists():
            return ()
        try:
            with self.path.open('r', encoding='utf-8') as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.error("Failed to load data from %s: %s", self.path, e)
            return ()

        entries = data.get(self.key) if isinstance(data, dict) else None
        if entries is None:
            return ()
        if not isinstance(entries, list):
            logger.warning("Ignoring %s: '%s' is not a list", self.path, self.key)
            return ()

        records = []
        seen = set()
        for position, entry in enumerate(entries):
            try:
                record = ExpenseRecord.from_dict(entry)
            except InvalidExpenseError as e:
                logger.warning("Skipping expense #%d in %s: %s", position, self.path, e)
                continue
            if record.id in seen:
                logger.warning("Skipping expense #%d in %s: duplicate id %s", position, self.path, record.id)
                continue
            seen.add(record.id)
            records.append(record)
        return tuple(records)

    def persist(self, records: Optional[Iterable[ExpenseRecord]] = None) -> None:
        """Write the full snapshot to disk, replacing any previous one.

        Args:
            records: Optional records to write. Defaults to the in-memory collection.

        Raises:
            OSError: If the file cannot be written.
        """
        snapshot = self._records if records is None else tuple(records)
        payload = {self.key: [record.to_dict() for record in snapshot]}

        target = self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as handle:
                json.dump(payload, handle, indent=2, ensure_ascii=False)
            os.replace(tmp_name, target)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise OSError(f"Failed to save expenses to {target}: {e}") from e
        logger.debug("Persisted %d expenses to %s", len(snapshot), target)

    def insert(self, record: ExpenseRecord) -> None:
        """Prepend a record and persist the collection.

        Raises:
            ValueError: If a record with the same id is already stored
        """
        if self.get(record.id) is not None:
            raise ValueError(f"Duplicate expense id: {record.id}")
        self._records = (record,) + self._records
        self.persist()
        logger.info("Added expense %s (%s)", record.id, record.description)

    def add(self, draft: ExpenseDraft, now: Optional[int] = None) -> ExpenseRecord:
        """Validate a form draft, store the resulting record and return it.

        Raises:
            InvalidExpenseError: If the draft is invalid; the store is untouched.
        """
        record = draft.to_record(now=now)
        self.insert(record)
        return record

    def remove(self, record_id: str) -> bool:
        """Delete a record by id.

        Returns:
            True if a record was removed, False if the id was unknown.
        """
        remaining = tuple(record for record in self._records if record.id != record_id)
        if len(remaining) == len(self._records):
            return False
        self._records = remaining
        self.persist()
        logger.info("Deleted expense %s", record_id)
        return True
