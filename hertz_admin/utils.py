"""
Small helpers shared by the models, storage and routes.
"""

import re
import uuid
from datetime import datetime, timezone

from flask import request, abort

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def utcnow():
    """Current UTC time as a naive datetime, matching the stored columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today_start():
    """Midnight (UTC) of the current day."""
    return utcnow().replace(hour=0, minute=0, second=0, microsecond=0)


def new_id():
    return str(uuid.uuid4())


def isoformat(value):
    return value.isoformat() if value else None


def to_snake_case(key):
    """``imageUrl`` -> ``image_url``; snake_case keys pass through."""
    return _CAMEL_BOUNDARY.sub('_', key).lower()


def parse_bool(value):
    """Parse a query-string flag.

    Returns None when the value is absent, raises ValueError when it is
    present but not a recognised boolean.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f'Not a boolean: {value!r}')


def json_payload():
    """The request's JSON object body, ``{}`` when absent.

    Aborts with 400 when the body is JSON but not an object.
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        abort(400, description='Request body must be a JSON object.')
    return payload


def require_strings(data, fields):
    """Abort with 400 when any of ``fields`` is present but not a string."""
    wrong = [f for f in fields if data.get(f) is not None and not isinstance(data[f], str)]
    if wrong:
        abort(400, description='Fields must be strings: ' + ', '.join(wrong) + '.')
