"""Record repositories for briefs, case studies and pitches."""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from pitchforge.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(ABC, Generic[RecordT]):
    """
    Storage interface consumed by the service layer.

    The scoring and composition core never touches a repository; the
    service loads records, passes them in explicitly and saves the result.
    """

    kind: str = "Record"

    @abstractmethod
    def get(self, record_id: str) -> RecordT:
        """Return the record with ``record_id`` or raise NotFoundError."""

    @abstractmethod
    def list(self) -> List[RecordT]:
        """Return all records in insertion order."""

    @abstractmethod
    def save(self, record: RecordT) -> RecordT:
        """Insert or replace a record, assigning an id when it has none."""

    def find(self, record_id: str) -> Optional[RecordT]:
        """Return the record or None instead of raising."""
        try:
            return self.get(record_id)
        except NotFoundError:
            return None


class InMemoryRepository(Repository[RecordT]):
    """
    Dict-backed repository.

    Stores copies so that callers mutating a returned model cannot change
    the stored state behind the repository's back.
    """

    def __init__(self, kind: str = "Record", records: Optional[List[RecordT]] = None):
        self.kind = kind
        self._records: Dict[str, RecordT] = {}
        for record in records or []:
            self.save(record)

    # ===========================================
    # Read Operations
    # ===========================================

    def get(self, record_id: str) -> RecordT:
        record = self._records.get(record_id)
        if record is None:
            logger.warning(f"{self.kind} not found: {record_id}")
            raise NotFoundError(self.kind, record_id)
        return record.model_copy(deep=True)

    def list(self) -> List[RecordT]:
        return [record.model_copy(deep=True) for record in self._records.values()]

    # ===========================================
    # Write Operations
    # ===========================================

    def save(self, record: RecordT) -> RecordT:
        if not getattr(record, "id", None):
            record = record.model_copy(update={"id": uuid.uuid4().hex[:12]})

        self._records[record.id] = record.model_copy(deep=True)
        logger.debug(f"Saved {self.kind} {record.id}")
        return record
