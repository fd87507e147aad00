from __future__ import annotations

from datetime import datetime
from typing import Optional

from flask import Response, jsonify, request

from ..core.responses import ServiceResponse
from .datetime_utils import parse_iso_datetime
from .serialization import to_jsonable


def respond(response: ServiceResponse):
    """Map a service envelope onto 200 / 400."""
    return jsonify(to_jsonable(response)), (200 if response.is_success else 400)


def error_response(message: str, status: int):
    return jsonify({"isSuccess": False, "message": message}), status


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def query_datetime(name: str) -> Optional[datetime]:
    """Query-string date; missing and malformed values both come back as None."""
    return parse_iso_datetime(request.args.get(name))


def csv_attachment(data: bytes, filename: str) -> Response:
    return Response(
        data,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
