"""Field checks for the enrollment form."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from enrollment_store import WIRE_FIELDS

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Checked in this order; every failure is reported.
_REQUIRED: Tuple[Tuple[str, str], ...] = (
    ("nombres", "Nombres es obligatorio"),
    ("apellidos", "Apellidos es obligatorio"),
    ("documento", "Documento es obligatorio"),
)
EMAIL_ERROR = "Email no válido"
PROGRAM_ERROR = "Programa es obligatorio"


@dataclass(frozen=True)
class ValidationResult:
    candidate: Dict[str, str]
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def is_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value))


def normalize(raw: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Trim every known field; missing ones become empty strings."""
    raw = raw or {}
    return {wire: _clean(raw.get(wire)) for _, wire in WIRE_FIELDS}


def validate_enrollment(raw: Optional[Mapping[str, Any]]) -> ValidationResult:
    data = normalize(raw)

    errors = []
    for key, message in _REQUIRED:
        if not data[key]:
            errors.append(message)
    if not is_email(data["email"]):
        errors.append(EMAIL_ERROR)
    if not data["programa"]:
        errors.append(PROGRAM_ERROR)

    return ValidationResult(candidate=data, errors=tuple(errors))


__all__ = ["ValidationResult", "validate_enrollment", "normalize", "is_email"]
