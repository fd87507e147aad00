from __future__ import annotations

import logging

from flask import Flask

from ..common.http import error_response, json_body, respond
from ..container import Container
from ..employees.controller import new_employee_from

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        try:
            return respond(container.auth_service.register(new_employee_from(json_body())))
        except Exception as e:
            logger.exception("Unhandled error in auth_register")
            return error_response(str(e), 500)

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        try:
            body = json_body()
            return respond(container.auth_service.login(body.get("email"), body.get("password")))
        except Exception as e:
            logger.exception("Unhandled error in auth_login")
            return error_response(str(e), 500)
