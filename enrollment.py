"""Enrollment blueprint: form, submission, admin listing and health check."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from enrollment_store import EnrollmentStore
from rendering import (
    admin_listing,
    render_error_page,
    render_form_page,
    render_success_page,
)
from validation import validate_enrollment

log = logging.getLogger("enrollment")

enrollment_bp = Blueprint("enrollment", __name__, template_folder="templates")


def _store() -> EnrollmentStore:
    return current_app.config["ENROLLMENT_STORE"]


def _wants_json_response() -> bool:
    # */* and browser headers rank both equally; only an explicit preference wins
    accept = request.accept_mimetypes
    return accept.quality("application/json") > accept.quality("text/html")


def _submission_payload() -> Dict[str, Any]:
    if request.is_json:
        payload = request.get_json(silent=True)
        return payload if isinstance(payload, dict) else {}
    return request.form.to_dict()


@enrollment_bp.get("/")
def form_page():
    return render_form_page(
        current_app.config["ENROLLMENT_PROGRAMS"],
        current_app.config["ENROLLMENT_MODALITIES"],
    )


# /matricular and /admin/matriculas are the legacy paths
@enrollment_bp.post("/matricular")
@enrollment_bp.post("/submit")
def submit():
    result = validate_enrollment(_submission_payload())

    if not result.ok:
        log.info("Enrollment rejected with %d error(s)", len(result.errors))
        if _wants_json_response():
            return jsonify({"ok": False, "errors": list(result.errors)}), 400
        return render_error_page(result.errors)

    record = _store().append(result.candidate)
    log.info("Enrollment %s recorded for program %r", record.id, record.program)

    if _wants_json_response():
        return jsonify({"ok": True, "record": record.to_dict()}), 200
    return render_success_page(record)


@enrollment_bp.get("/admin/matriculas")
@enrollment_bp.get("/admin/records")
def records():
    _, items = _store().list()
    return admin_listing(items)


@enrollment_bp.get("/health")
def health():
    return jsonify({
        "ok": True,
        "env": current_app.config["APP_ENV"],
        "ts": datetime.now(timezone.utc).isoformat(),
    })
