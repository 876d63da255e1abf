"""Response bodies for the enrollment flow.

HTML comes from the Jinja templates in ``templates/`` (autoescaped, so
submitted values never reach the page as markup). The admin listing is plain
JSON.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Sequence, Tuple

from flask import jsonify, render_template

from enrollment_store import EnrollmentRecord


def _format_ts(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S %Z")


def render_form_page(programs: Sequence[str], modalities: Sequence[str]) -> str:
    return render_template(
        "enroll_form.html",
        programs=programs,
        modalities=modalities,
    )


def render_error_page(errors: Iterable[str]) -> Tuple[str, int]:
    return render_template("enroll_errors.html", errors=list(errors)), 400


def render_success_page(record: EnrollmentRecord) -> Tuple[str, int]:
    return (
        render_template(
            "enroll_receipt.html",
            record=record,
            ts_display=_format_ts(record.ts),
            phone_display=record.phone or "-",
        ),
        200,
    )


def admin_listing(records: Sequence[EnrollmentRecord]):
    """JSON listing of every record, in insertion order."""
    return jsonify({
        "total": len(records),
        "items": [r.to_dict() for r in records],
    })


__all__ = [
    "render_form_page",
    "render_error_page",
    "render_success_page",
    "admin_listing",
]
