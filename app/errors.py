# app/errors.py
from __future__ import annotations

import stripe
from flask import current_app
from werkzeug.exceptions import HTTPException

from .utils.api import err
from .utils.money import Money, format_usd

GENERIC_ERROR = "Something went wrong. Please try again."
PROCESSOR_REJECTED = "Payment processor rejected the request"

class CheckoutError(Exception):
    status_code = 400
    kind = "checkout_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

# ---- local validation -------------------------------------------------------

class ValidationError(CheckoutError):
    kind = "validation_error"

    # reasons
    MISSING_FIELD = "MissingField"
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_DATE_FORMAT = "InvalidDateFormat"
    INVALID_DATE_RANGE = "InvalidDateRange"
    INVALID_BODY = "InvalidBody"

    def __init__(self, field: str, reason: str, message: str | None = None):
        super().__init__(message or f"{field} is invalid")
        self.field = field
        self.reason = reason

# ---- promotion lookup -------------------------------------------------------

class PromotionNotFound(CheckoutError):
    kind = "promotion_not_found"

    def __init__(self, code: str | None = None):
        super().__init__("Invalid promo code")
        self.code = code

class PromotionExpired(CheckoutError):
    kind = "promotion_expired"

    def __init__(self, code: str | None = None):
        super().__init__("Promo code expired")
        self.code = code

class PromotionMinimumNotMet(CheckoutError):
    kind = "promotion_minimum_not_met"

    def __init__(self, required: Money):
        super().__init__(f"Minimum booking amount of {format_usd(required)} required for this promo code")
        self.required = required

# ---- processor --------------------------------------------------------------

class ProcessorInvalidRequest(CheckoutError):
    kind = "processor_invalid_request"

    def __init__(self, detail: str | None = None):
        super().__init__(PROCESSOR_REJECTED)
        self.detail = detail

class ProcessorUnavailable(CheckoutError):
    status_code = 500
    kind = "processor_unavailable"

    def __init__(self, detail: str | None = None):
        super().__init__(GENERIC_ERROR)
        self.detail = detail

def classify(e: Exception) -> tuple[int, str, str]:
    """Return (status, user-facing message, classification) for any failure."""
    if isinstance(e, CheckoutError):
        return e.status_code, e.message, e.kind
    if isinstance(e, stripe.InvalidRequestError):
        return 400, PROCESSOR_REJECTED, ProcessorInvalidRequest.kind
    if isinstance(e, stripe.StripeError):
        return 500, GENERIC_ERROR, ProcessorUnavailable.kind
    return 500, GENERIC_ERROR, "internal_error"

def register_error_handlers(app):
    @app.errorhandler(CheckoutError)
    def handle_checkout_error(e):
        status, message, kind = classify(e)
        detail = getattr(e, "detail", None)
        if status >= 500:
            current_app.logger.error("checkout failed [%s]: %s", kind, detail or e)
        else:
            current_app.logger.warning("checkout rejected [%s]: %s%s", kind, message,
                                       f" ({detail})" if detail else "")
        return err(message, status)

    @app.errorhandler(stripe.StripeError)
    def handle_stripe_error(e):
        status, message, kind = classify(e)
        current_app.logger.error("payment processor error [%s]: %s", kind, e.user_message or str(e))
        return err(message, status)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return err(e.name, e.code)
        current_app.logger.exception("unexpected error [internal_error]")
        return err(GENERIC_ERROR, 500)
