# app/services/checkout_service.py
import logging
from dataclasses import dataclass

import stripe

from ..errors import ProcessorInvalidRequest, ProcessorUnavailable
from ..model import BookingRequest, CheckoutSession, CheckoutSessionRequest, DiscountResult, LineItem
from ..utils.money import to_minor_units, to_string_money
from .promotion_service import calculate_discount, resolve_promotion, reverify_promotion

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class RedirectUrls:
    success_url: str
    cancel_url: str

    @classmethod
    def from_config(cls, config) -> "RedirectUrls":
        site = config["SITE_URL"].rstrip("/")
        return cls(
            success_url=f"{site}{config['SUCCESS_PATH']}",
            cancel_url=f"{site}{config['CANCEL_PATH']}",
        )

@dataclass(frozen=True)
class CheckoutResult:
    session: CheckoutSession
    discount: DiscountResult

def _line_item_name(booking: BookingRequest) -> str:
    name = f"Booking from {booking.checkin.isoformat()} to {booking.checkout.isoformat()}"
    if booking.promo_code:
        name += f", Promo: {booking.promo_code}"
    return name

def _line_item_description(booking: BookingRequest) -> str:
    nights = booking.nights
    return f"Short-term rental stay, {nights} night{'s' if nights != 1 else ''}"

def build_session_request(booking: BookingRequest, discount: DiscountResult, urls: RedirectUrls,
                          promotion_code_id: str | None = None) -> CheckoutSessionRequest:
    """Assemble the processor-facing session request.

    ``promotion_code_id`` is only passed when the promotion was re-verified; it is
    the sole source of the ``discounts`` attachment.
    """
    metadata = {
        "checkin": booking.checkin.isoformat(),
        "checkout": booking.checkout.isoformat(),
        "original_total": to_string_money(booking.total),
        "promo_code": booking.promo_code or "",
        "promo_code_id": discount.promo_code_id or booking.promo_code_id or "",
        "client_promo_code_id": booking.promo_code_id or "",
        "contact_id": booking.contact_id or "",
    }
    return CheckoutSessionRequest(
        line_item=LineItem(
            name=_line_item_name(booking),
            description=_line_item_description(booking),
            unit_amount=to_minor_units(discount.adjusted_total),
        ),
        success_url=urls.success_url,
        cancel_url=urls.cancel_url,
        metadata=metadata,
        promotion_code_id=promotion_code_id,
    )

def quote_promotion(processor, booking: BookingRequest, now=None) -> DiscountResult:
    promo = resolve_promotion(processor, booking.promo_code, booking.total, now=now)
    result = calculate_discount(booking.total, promo.coupon, promo_code_id=promo.id)
    log.info("promo %r applied: discount=%s adjusted_total=%s original_total=%s",
             booking.promo_code, result.discount, result.adjusted_total, booking.total)
    return result

def create_checkout_session(processor, booking: BookingRequest, urls: RedirectUrls,
                            now=None) -> CheckoutResult:
    """
    Flow:
      1) promo code string -> hard lookup, discount folded into the unit amount
      2) promo code id -> soft re-verification; the processor applies it unless
         a code discount was already folded in
      3) neither -> full total
    """
    promotion_code_id = None
    if booking.promo_code:
        discount = quote_promotion(processor, booking, now=now)
    else:
        discount = calculate_discount(booking.total)

    if booking.promo_code_id:
        promo = reverify_promotion(processor, booking.promo_code_id, now=now)
        if promo is not None and booking.promo_code:
            log.info("promotion %s re-verified but not attached: code %r already discounted the total",
                     promo.id, booking.promo_code)
        elif promo is not None:
            promotion_code_id = promo.id

    request = build_session_request(booking, discount, urls, promotion_code_id=promotion_code_id)

    try:
        session = processor.create_checkout_session(request)
    except stripe.InvalidRequestError as e:
        raise ProcessorInvalidRequest(e.user_message or str(e)) from e
    except stripe.StripeError as e:
        raise ProcessorUnavailable(f"session creation failed: {e}") from e

    log.info("checkout session %s created: unit_amount=%s discounts=%s",
             session.id, request.line_item.unit_amount, bool(promotion_code_id))
    return CheckoutResult(session=session, discount=discount)
