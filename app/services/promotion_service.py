# app/services/promotion_service.py
import logging
from datetime import datetime, timezone

import stripe

from ..errors import (
    PromotionExpired, PromotionMinimumNotMet, PromotionNotFound, ProcessorUnavailable,
)
from ..model import Coupon, DiscountResult, PromotionCode
from ..utils.money import D, Money, from_minor_units

log = logging.getLogger(__name__)

def _now_utc():
    return datetime.now(timezone.utc)

def calculate_discount(base_total: Money, coupon: Coupon | None = None,
                       promo_code_id: str | None = None) -> DiscountResult:
    """
    Pure discount math at major-unit scale. No rounding here; the single
    conversion to minor units happens when the session is built.
      percent: base * percent_off / 100
      fixed:   amount_off / 100
    """
    base = D(base_total)
    if coupon is None:
        return DiscountResult.none(base)

    discount = D(0)
    if coupon.kind == "percent":
        discount = base * D(coupon.percent_off) / D(100)
    elif coupon.kind == "fixed":
        discount = from_minor_units(coupon.amount_off)

    return DiscountResult(
        discount=discount,
        adjusted_total=max(D(0), base - discount),
        promo_code_id=promo_code_id,
    )

def resolve_promotion(processor, code: str, base_total: Money, now=None) -> PromotionCode:
    """Look up an exact, active promotion code and check it against the booking total.

    Any problem here fails the request.
    """
    code = (code or "").strip()
    if not code:
        raise PromotionNotFound(code)

    log.info("looking up promo code %r", code)
    try:
        promo = processor.find_active_promotion(code)
    except stripe.InvalidRequestError as e:
        log.info("promo lookup rejected for %r: %s", code, e.user_message or e)
        raise PromotionNotFound(code) from e
    except stripe.StripeError as e:
        raise ProcessorUnavailable(f"promotion lookup failed: {e}") from e

    # exact match only; the processor filter is authoritative but be strict about case
    if promo is None or promo.code != code:
        raise PromotionNotFound(code)

    if promo.is_expired(now or _now_utc()):
        raise PromotionExpired(code)

    min_amount = promo.coupon.min_amount
    if min_amount and D(base_total) < from_minor_units(min_amount):
        raise PromotionMinimumNotMet(from_minor_units(min_amount))

    log.info("promo code %r resolved to %s", code, promo.id)
    return promo

def reverify_promotion(processor, promo_code_id: str, now=None) -> PromotionCode | None:
    """Re-check a previously resolved promotion right before checkout.

    Returns None instead of raising; the caller proceeds without a discount.
    """
    if not promo_code_id:
        return None
    try:
        promo = processor.retrieve_promotion(promo_code_id)
    except stripe.StripeError as e:
        log.warning("promotion %s could not be retrieved, continuing without discount: %s",
                    promo_code_id, e.user_message or e)
        return None

    if not promo.active:
        log.warning("promotion %s is no longer active, continuing without discount", promo_code_id)
        return None
    if promo.is_expired(now or _now_utc()):
        log.warning("promotion %s has expired, continuing without discount", promo_code_id)
        return None
    return promo
