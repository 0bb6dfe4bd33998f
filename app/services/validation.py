# app/services/validation.py
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from ..errors import ValidationError
from ..model import BookingRequest
from ..utils.money import D, MAX_UNIT_AMOUNT, from_minor_units, parse_amount

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# request key -> user-facing message when missing
_REQUIRED_MESSAGES = {
    "contact_id": "contact_id is required",
    "promoCode": "Valid promo code is required",
}

# must arrive as JSON strings, not numbers
_STRING_FIELDS = {"promoCode"}

@dataclass(frozen=True)
class ValidationPolicy:
    """Which fields a call site insists on. One policy, not one code path per endpoint."""
    required_fields: tuple[str, ...] = ()
    require_dates: bool = True
    allow_zero_total: bool = False

    @classmethod
    def from_config(cls, config, **overrides) -> "ValidationPolicy":
        fields = config.get("CHECKOUT_REQUIRED_FIELDS") or ()
        if isinstance(fields, str):
            fields = tuple(f.strip() for f in fields.split(",") if f.strip())
        opts = {
            "required_fields": tuple(fields),
            "allow_zero_total": bool(config.get("ALLOW_ZERO_TOTAL", False)),
        }
        opts.update(overrides)
        return cls(**opts)

def _clean_str(value) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    value = value.strip()
    return value or None

def _parse_total(raw, allow_zero: bool):
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError("total", ValidationError.MISSING_FIELD, "Total amount is required")
    total = parse_amount(raw)
    if total is None:
        raise ValidationError("total", ValidationError.INVALID_AMOUNT, "Invalid total amount")
    if total < 0 or (total == 0 and not allow_zero):
        raise ValidationError("total", ValidationError.INVALID_AMOUNT, "Invalid total amount")
    if total > from_minor_units(MAX_UNIT_AMOUNT):
        raise ValidationError("total", ValidationError.INVALID_AMOUNT, "Invalid total amount")
    return total

def _parse_date(field: str, raw) -> date:
    message = f"Invalid date format for {field}, expected YYYY-MM-DD"
    if not isinstance(raw, str) or not _ISO_DATE.match(raw.strip()):
        raise ValidationError(field, ValidationError.INVALID_DATE_FORMAT, message)
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        # well-formed but not a calendar date, e.g. 2024-13-01
        raise ValidationError(field, ValidationError.INVALID_DATE_FORMAT, message)

def validate_booking(data: dict, policy: ValidationPolicy | None = None) -> BookingRequest:
    policy = policy or ValidationPolicy()
    data = data or {}

    total = _parse_total(data.get("total"), policy.allow_zero_total)

    checkin = checkout = None
    if policy.require_dates:
        checkin = _parse_date("checkin", data.get("checkin"))
        checkout = _parse_date("checkout", data.get("checkout"))
        if checkout <= checkin:
            raise ValidationError("checkout", ValidationError.INVALID_DATE_RANGE,
                                  "Check-out date must be after check-in date")

    for field in policy.required_fields:
        value = data.get(field)
        if not _clean_str(value) or (field in _STRING_FIELDS and not isinstance(value, str)):
            message = _REQUIRED_MESSAGES.get(field, f"{field} is required")
            raise ValidationError(field, ValidationError.MISSING_FIELD, message)

    return BookingRequest(
        total=D(total),
        checkin=checkin,
        checkout=checkout,
        promo_code=_clean_str(data.get("promoCode")),
        promo_code_id=_clean_str(data.get("promoCodeId")),
        contact_id=_clean_str(data.get("contact_id")),
    )
