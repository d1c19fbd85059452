from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_session_date
from ..common.http import current_caller, json_body, make_token_required
from ..container import Container
from .model import AttendanceSession


def session_to_json(session: AttendanceSession) -> dict:
    return {
        "id": session.session_id,
        "classId": session.class_id,
        "date": format_session_date(session.session_date),
        "records": [{"studentId": e.student_id, "status": e.status.value} for e in session.records],
    }


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.token_service)

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @token_required
    def mark_attendance():
        body = json_body()
        result = container.attendance_service.mark_attendance(
            current_caller(),
            class_id=body.get("classId"),
            session_date=body.get("date"),
            records=body.get("records"),
        )
        return jsonify(session_to_json(result.session)), 201 if result.created else 200

    @app.route("/api/attendance/<class_id>", methods=["GET"], endpoint="class_attendance")
    @token_required
    def class_attendance(class_id: str):
        sessions = container.attendance_service.get_attendance_for_class(current_caller(), class_id)
        return jsonify([session_to_json(s) for s in sessions])
