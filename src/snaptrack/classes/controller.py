from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_caller, make_token_required
from ..container import Container
from .model import ClassSection


def class_to_json(section: ClassSection) -> dict:
    return {
        "id": section.class_id,
        "name": section.name,
        "schedule": section.schedule,
        "teacherId": section.teacher_id,
        "students": list(section.student_ids),
    }


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.token_service)

    @app.route("/api/classes/teacher", methods=["GET"], endpoint="teacher_classes")
    @token_required
    def teacher_classes():
        sections = container.roster_service.classes_for_teacher(current_caller())
        return jsonify([class_to_json(s) for s in sections])

    @app.route("/api/classes/student", methods=["GET"], endpoint="student_classes")
    @token_required
    def student_classes():
        sections = container.roster_service.classes_for_student(current_caller())
        return jsonify([class_to_json(s) for s in sections])
