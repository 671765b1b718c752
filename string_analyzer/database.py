import logging
import threading
from typing import Dict, List, Optional

from fastapi import Request

from string_analyzer.exceptions import AlreadyExistsError, NotFoundError
from string_analyzer.models.filters import FilterSet
from string_analyzer.models.record import StringRecord
from string_analyzer.services.filter_engine import matches

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# IN-MEMORY STORE
# ------------------------------------------------------------------------------
class StringStore:
    """
    Process-lifetime collection of analyzed strings.

    Records are keyed by their exact value, with a secondary index from
    identifier to value. A single lock guards both indexes, so every
    operation sees and leaves the store in a consistent state.
    Records go in and come out as deep copies, so callers never hold a
    reference to stored state.
    """

    def __init__(self):
        self._records: Dict[str, StringRecord] = {}
        self._identifiers: Dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, value: str) -> bool:
        with self._lock:
            return value in self._records

    def create(self, record: StringRecord) -> StringRecord:
        with self._lock:
            if record.value in self._records:
                logger.warning(f"Rejected duplicate string (id={record.identifier})")
                raise AlreadyExistsError()

            self._records[record.value] = record.model_copy(deep=True)
            self._identifiers[record.identifier] = record.value

        logger.info(f"Stored string (id={record.identifier}, length={record.properties.length})")
        return record

    def get(self, value: str) -> StringRecord:
        with self._lock:
            record = self._records.get(value)

        if record is None:
            logger.warning("String lookup missed")
            raise NotFoundError()
        return record.model_copy(deep=True)

    def get_by_identifier(self, identifier: str) -> StringRecord:
        with self._lock:
            value = self._identifiers.get(identifier)
            record = self._records.get(value) if value is not None else None

        if record is None:
            raise NotFoundError()
        return record.model_copy(deep=True)

    def delete(self, value: str) -> None:
        with self._lock:
            record = self._records.pop(value, None)
            if record is None:
                logger.warning("Delete requested for unknown string")
                raise NotFoundError()
            self._identifiers.pop(record.identifier, None)

        logger.info(f"Deleted string (id={record.identifier})")

    def list(self, filters: Optional[FilterSet] = None) -> List[StringRecord]:
        """Records matching every given filter, in insertion order."""
        with self._lock:
            return [
                record.model_copy(deep=True)
                for record in self._records.values()
                if matches(record, filters)
            ]


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store


# ------------------------------------------------------------------------------
# INITIALIZATION
# ------------------------------------------------------------------------------
def init_store() -> StringStore:
    """Create an empty store (runs once on startup)."""
    store = StringStore()
    logger.info("✅ In-memory string store ready.")
    return store
