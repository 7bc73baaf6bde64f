from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..analytics.engine import attendance_percentage
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .entry import batch_records, new_record
from .model import Subject
from .serializer import subject_to_dict

logger = logging.getLogger(__name__)


def _subject_json(subject: Subject) -> dict:
    data = subject_to_dict(subject)
    data["percentage"] = round(attendance_percentage(subject), 2)
    return data


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        message = "Request body must be a JSON object"
        raise ValidationError(message, {"body": message})
    return data


def register(app: Flask, container: Container) -> None:
    store = container.store

    def json_errors(view):
        """Map domain errors to JSON responses the UI can show next to its forms."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e), "errors": e.errors}), 400
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e), "errors": {}}), 404
            except Exception as e:
                logger.exception("Unhandled error in %s", request.path)
                message = f"Internal error: {e}" if app.config.get("DEBUG") else "Internal error"
                return jsonify({"success": False, "message": message, "errors": {}}), 500

        return wrapper

    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    @json_errors
    def list_subjects():
        return jsonify({"subjects": [_subject_json(s) for s in store.list_subjects()]})

    @app.route("/api/subjects", methods=["POST"], endpoint="create_subject")
    @json_errors
    def create_subject():
        data = _json_body()
        subject = store.create_subject(data.get("name", ""), data.get("code", ""))
        return jsonify({"success": True, "subject": _subject_json(subject)}), 201

    @app.route("/api/subjects/<subject_id>", methods=["GET"], endpoint="get_subject")
    @json_errors
    def get_subject(subject_id: str):
        return jsonify({"subject": _subject_json(store.require_subject(subject_id))})

    @app.route("/api/subjects/<subject_id>", methods=["PUT"], endpoint="edit_subject")
    @json_errors
    def edit_subject(subject_id: str):
        data = _json_body()
        store.edit_subject(subject_id, data.get("name", ""), data.get("code", ""))
        return jsonify({"success": True, "subject": _subject_json(store.require_subject(subject_id))})

    @app.route("/api/subjects/<subject_id>", methods=["DELETE"], endpoint="delete_subject")
    @json_errors
    def delete_subject(subject_id: str):
        store.delete_subject(subject_id)
        return "", 204

    @app.route("/api/subjects/<subject_id>/records", methods=["POST"], endpoint="add_records")
    @json_errors
    def add_records(subject_id: str):
        store.require_subject(subject_id)
        data = _json_body()

        if "batch" in data:
            items = data.get("batch") or []
            if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
                raise ValidationError("Batch must be a list", {"batch": "Batch must be a list"})
            records = batch_records((item.get("date", ""), item.get("status", "present")) for item in items)
        else:
            records = [new_record(data.get("date", ""), data.get("status", "present"), data.get("note"))]

        store.append_records(subject_id, records)
        return (
            jsonify({"success": True, "added": len(records), "subject": _subject_json(store.require_subject(subject_id))}),
            201,
        )
