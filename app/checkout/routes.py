# app/checkout/routes.py
from flask import current_app

from ..extensions import get_processor
from ..services.checkout_service import RedirectUrls, create_checkout_session, quote_promotion
from ..services.validation import ValidationPolicy, validate_booking
from ..utils.api import ok
from ..utils.money import to_json_number
from ..utils.request import json_body
from . import bp

@bp.post("/create-checkout-session")
def create_session():
    """
    Body:
      - total (required, > 0)
      - checkin, checkout (YYYY-MM-DD, checkout after checkin)
      - promoCode (optional, exact match)
      - promoCodeId (optional, previously resolved via /api/promo-code)
      - contact_id (required when CHECKOUT_REQUIRED_FIELDS lists it)
    """
    booking = validate_booking(json_body(), ValidationPolicy.from_config(current_app.config))
    result = create_checkout_session(
        get_processor(), booking, RedirectUrls.from_config(current_app.config),
    )
    return ok({
        "url": result.session.url,
        "session_id": result.session.id,
        "adjusted_total": to_json_number(result.discount.adjusted_total),
        "promoCode": booking.promo_code,
    })

@bp.post("/promo-code")
def promo_code():
    policy = ValidationPolicy.from_config(
        current_app.config, required_fields=("promoCode",), require_dates=False,
    )
    booking = validate_booking(json_body(), policy)
    result = quote_promotion(get_processor(), booking)
    return ok({
        "adjusted_total": to_json_number(result.adjusted_total),
        "discount": to_json_number(result.discount),
        "promoCode": booking.promo_code,
        "promoCodeId": result.promo_code_id,
    }, success=True)
