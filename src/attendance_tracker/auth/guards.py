from __future__ import annotations

from functools import wraps

from flask import g, request

from ..common.http import error_response
from ..core.enums import RoleName
from ..core.exceptions import AuthenticationError
from .tokens import TokenService


def roles_required(tokens: TokenService, *roles: RoleName):
    """Require a valid ``Authorization: Bearer`` token whose role is in ``roles``."""
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            header = request.headers.get("Authorization", "")
            scheme, _, token = header.partition(" ")
            if scheme.lower() != "bearer" or not token.strip():
                return error_response("Authorization token is missing.", 401)

            try:
                claims = tokens.decode(token.strip())
            except AuthenticationError as e:
                return error_response(str(e), 401)

            if allowed and claims.get("role") not in allowed:
                return error_response("You do not have permission to perform this action.", 403)

            g.current_user = claims
            return view(*args, **kwargs)

        return wrapper

    return decorator
