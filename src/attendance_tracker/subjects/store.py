from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..common.datetime_utils import now_local
from ..common.identifiers import new_id
from ..common.validators import require_non_empty, require_pattern
from ..core.constants import STORAGE_KEY, SUBJECT_CODE_PATTERN
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from ..storage.repository import KeyValueStorage
from .model import AttendanceRecord, Subject
from .serializer import dumps_subjects, loads_subjects

logger = logging.getLogger(__name__)

Snapshot = Tuple[Subject, ...]
Listener = Callable[[Snapshot], None]


def validate_subject_fields(name: Optional[str], code: Optional[str]) -> Tuple[str, str]:
    """Return the normalised (name, code) or raise with every failing field."""
    errors: Dict[str, str] = {}
    clean_name = ""
    clean_code = ""

    try:
        clean_name = require_non_empty(name, "name", "Subject name is required")
    except ValidationError as e:
        errors.update(e.errors)

    try:
        clean_code = require_non_empty(code, "code", "Subject code is required").upper()
        require_pattern(
            clean_code,
            "code",
            SUBJECT_CODE_PATTERN,
            "Subject code should contain only uppercase letters and numbers",
        )
    except ValidationError as e:
        errors.update(e.errors)

    if errors:
        raise ValidationError("Invalid subject: " + ", ".join(sorted(errors)), errors)
    return clean_name, clean_code


class AttendanceStore:
    """Owns the subject collection and every mutation of it.

    Each mutation validates first, then swaps in a new tuple of immutable
    subjects, writes the whole collection to storage and notifies listeners.
    Readers always get a snapshot that later mutations cannot change.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = STORAGE_KEY,
        subjects: Iterable[Subject] = (),
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = new_id,
    ):
        self._storage = storage
        self._key = key
        self._subjects: Snapshot = tuple(subjects)
        self._clock = clock
        self._id_factory = id_factory
        self._listeners: List[Listener] = []

    @classmethod
    def load(cls, storage: KeyValueStorage, *, key: str = STORAGE_KEY, **kwargs) -> "AttendanceStore":
        raw = storage.get(key)
        subjects = loads_subjects(raw) if raw else []
        logger.info("Loaded %d subject(s) from storage key %s", len(subjects), key)
        return cls(storage, key=key, subjects=subjects, **kwargs)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def list_subjects(self) -> Snapshot:
        return self._subjects

    def get_subject(self, subject_id: str) -> Optional[Subject]:
        for s in self._subjects:
            if s.subject_id == subject_id:
                return s
        return None

    def require_subject(self, subject_id: str) -> Subject:
        subject = self.get_subject(subject_id)
        if subject is None:
            raise NotFoundError(f"Subject {subject_id} does not exist")
        return subject

    def create_subject(self, name: str, code: str) -> Subject:
        clean_name, clean_code = validate_subject_fields(name, code)

        subject_id = self._id_factory()
        while self.get_subject(subject_id) is not None:
            subject_id = self._id_factory()

        subject = Subject(
            subject_id=subject_id,
            name=clean_name,
            code=clean_code,
            created_at=self._clock(),
        )
        self._commit(self._subjects + (subject,))
        logger.info("Created subject %s (%s)", subject.code, subject.subject_id)
        return subject

    def edit_subject(self, subject_id: str, name: str, code: str) -> None:
        current = self.require_subject(subject_id)
        clean_name, clean_code = validate_subject_fields(name, code)

        updated = replace(current, name=clean_name, code=clean_code)
        self._commit(tuple(updated if s.subject_id == subject_id else s for s in self._subjects))
        logger.info("Edited subject %s", subject_id)

    def delete_subject(self, subject_id: str) -> None:
        """Remove a subject with all its records. Unknown ids are a no-op."""
        if self.get_subject(subject_id) is None:
            logger.debug("Delete ignored, subject %s not found", subject_id)
            return

        self._commit(tuple(s for s in self._subjects if s.subject_id != subject_id))
        logger.info("Deleted subject %s", subject_id)

    def append_records(self, subject_id: str, records: Sequence[AttendanceRecord]) -> None:
        current = self.require_subject(subject_id)
        new_records = self._validate_records(current, records)

        updated = replace(current, records=current.records + new_records)
        self._commit(tuple(updated if s.subject_id == subject_id else s for s in self._subjects))
        logger.info("Appended %d record(s) to subject %s", len(new_records), subject_id)

    def _validate_records(self, subject: Subject, records: Sequence[AttendanceRecord]) -> Tuple[AttendanceRecord, ...]:
        used_ids = {r.record_id for r in subject.records}
        out: List[AttendanceRecord] = []

        for r in records:
            if not isinstance(r, AttendanceRecord):
                raise ValidationError("Not an attendance record", {"records": "Not an attendance record"})
            if not r.record_id or not str(r.record_id).strip():
                raise ValidationError("Record id is required", {"id": "Record id is required"})
            if r.record_id in used_ids:
                message = f"Record id {r.record_id} is already used in this subject"
                raise ValidationError(message, {"id": message})
            if not isinstance(r.date, date):
                raise ValidationError("Record date is required", {"date": "Record date is required"})
            if not isinstance(r.status, AttendanceStatus):
                message = "Attendance status must be 'present' or 'absent'"
                raise ValidationError(message, {"status": message})

            if isinstance(r.date, datetime):
                r = replace(r, date=r.date.date())
            used_ids.add(r.record_id)
            out.append(r)

        return tuple(out)

    def _commit(self, subjects: Snapshot) -> None:
        self._subjects = subjects
        try:
            self._storage.set(self._key, dumps_subjects(subjects))
        except StorageError:
            # In-memory state stays authoritative; only durability is lost.
            logger.exception("Failed to persist %d subject(s)", len(subjects))

        for listener in self._listeners:
            listener(subjects)
