# app/utils/request.py
from flask import request

from ..errors import ValidationError

def json_body() -> dict:
    if not request.get_data(cache=True):
        raise ValidationError("body", ValidationError.INVALID_BODY, "No request body provided")
    data = request.get_json(silent=True, force=True)
    if not isinstance(data, dict):
        raise ValidationError("body", ValidationError.INVALID_BODY, "Invalid JSON in request body")
    return data
