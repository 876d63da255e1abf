"""In-memory enrollment records.

Records live for the lifetime of the process only. The store is owned by the
Flask app (see ``main.create_app``) rather than being module state, so tests
can hand in a fresh one.
"""
from __future__ import annotations

import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Tuple

ID_BYTES = 8

# Record attribute -> field name used by the form and the admin listing.
WIRE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("first_name", "nombres"),
    ("last_name", "apellidos"),
    ("document_id", "documento"),
    ("email", "email"),
    ("phone", "telefono"),
    ("program", "programa"),
    ("modality", "modalidad"),
    ("start_date", "inicio"),
)


@dataclass(frozen=True)
class EnrollmentRecord:
    """A stored enrollment. Immutable once created."""

    id: str
    ts: datetime
    first_name: str
    last_name: str
    document_id: str
    email: str
    phone: str
    program: str
    modality: str
    start_date: str

    @property
    def full_name(self) -> str:
        return " ".join(v for v in (self.first_name, self.last_name) if v)

    def to_dict(self) -> Dict[str, str]:
        data = {"id": self.id, "ts": self.ts.isoformat()}
        for attr, wire in WIRE_FIELDS:
            data[wire] = getattr(self, attr)
        return data


class EnrollmentStore:
    """Append-only, insertion-ordered record list guarded by a lock."""

    def __init__(self) -> None:
        self._records: List[EnrollmentRecord] = []
        self._issued_ids = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _new_id(self) -> str:
        # Caller holds the lock.
        while True:
            candidate = secrets.token_hex(ID_BYTES)
            if candidate not in self._issued_ids:
                return candidate

    def append(self, fields: Mapping[str, Any]) -> EnrollmentRecord:
        """Store a validated submission keyed by wire field names."""
        values = {attr: str(fields.get(wire) or "") for attr, wire in WIRE_FIELDS}
        with self._lock:
            record = EnrollmentRecord(
                id=self._new_id(),
                ts=datetime.now(timezone.utc),
                **values,
            )
            self._issued_ids.add(record.id)
            self._records.append(record)
        return record

    def list(self) -> Tuple[int, Tuple[EnrollmentRecord, ...]]:
        with self._lock:
            snapshot = tuple(self._records)
        return len(snapshot), snapshot


__all__ = ["EnrollmentRecord", "EnrollmentStore", "WIRE_FIELDS"]
