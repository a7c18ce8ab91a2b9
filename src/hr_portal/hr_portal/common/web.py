"""Helpers shared by the JSON controllers."""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from enum import Enum
from functools import wraps
from typing import Any, Mapping, Optional

from flask import jsonify, request, session

from ..core.authorization import Identity
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong, please try again."


def current_identity() -> Optional[Identity]:
    user_id = session.get("user_id")
    if not user_id:
        return None
    return Identity(user_id=str(user_id), email=session.get("email"), role=Role.parse(session.get("role")))


def form_data() -> Mapping:
    """Request payload from either a JSON body or a submitted form."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form


def to_primitive(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_primitive(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {(k.value if isinstance(k, Enum) else k): to_primitive(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_primitive(v) for v in value]
    return value


def ok(data: Any = None, status: int = 200, **extra):
    body = {"status": "success", **extra}
    if data is not None:
        body["data"] = to_primitive(data)
    return jsonify(body), status


def error(message: str, status: int):
    return jsonify({"status": "error", "message": message}), status


def json_view(view):
    """Run ``view`` with the signed-in identity and map domain errors to JSON."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        identity = current_identity()
        if identity is None:
            return error("Please sign in to continue.", 401)
        try:
            return view(identity, *args, **kwargs)
        except ValidationError as e:
            return error(str(e), 400)
        except AuthorizationError as e:
            return error(str(e), 403)
        except NotFoundError as e:
            return error(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return error(GENERIC_ERROR_MESSAGE, 500)

    return wrapper
