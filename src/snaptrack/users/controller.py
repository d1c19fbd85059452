from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .model import User


def user_to_json(user: User) -> dict:
    return {"id": user.user_id, "name": user.name, "email": user.email, "role": user.role.value}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        result = container.auth_service.authenticate(body.get("email"), body.get("password"))
        return jsonify({"token": result.token, "user": user_to_json(result.user)})
