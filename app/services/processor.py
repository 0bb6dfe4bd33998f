# app/services/processor.py
"""Thin adapter over the Stripe SDK.

Only the three calls the checkout flow needs are exposed, and results are
mapped onto the request-scoped value objects in ``app.model`` so the service
layer never touches SDK objects. Tests swap this for an in-memory fake with the
same three methods.
"""
from __future__ import annotations

import stripe

from ..model import CheckoutSession, CheckoutSessionRequest, Coupon, PromotionCode

def _get(obj, key, default=None):
    if obj is None:
        return default
    try:
        value = obj[key]
    except (KeyError, TypeError, AttributeError):
        return default
    return default if value is None else value

def promotion_from_stripe(obj) -> PromotionCode:
    coupon = _get(obj, "coupon") or {}
    restrictions = _get(obj, "restrictions") or {}
    return PromotionCode(
        id=_get(obj, "id"),
        code=_get(obj, "code"),
        active=bool(_get(obj, "active", False)),
        expires_at=_get(obj, "expires_at"),
        coupon=Coupon(
            id=_get(coupon, "id"),
            percent_off=_get(coupon, "percent_off"),
            amount_off=_get(coupon, "amount_off"),
            # older coupons carried min_amount; current API puts it on the promotion code
            min_amount=_get(coupon, "min_amount") or _get(restrictions, "minimum_amount"),
        ),
    )

class StripeProcessor:
    def __init__(self, client: "stripe.StripeClient"):
        self.client = client

    @classmethod
    def from_api_key(cls, api_key: str) -> "StripeProcessor":
        return cls(stripe.StripeClient(api_key))

    def find_active_promotion(self, code: str) -> PromotionCode | None:
        result = self.client.promotion_codes.list(params={
            "code": code,
            "active": True,
            "limit": 1,
        })
        data = list(result.data)
        return promotion_from_stripe(data[0]) if data else None

    def retrieve_promotion(self, promotion_code_id: str) -> PromotionCode:
        return promotion_from_stripe(self.client.promotion_codes.retrieve(promotion_code_id))

    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        session = self.client.checkout.sessions.create(params=request.to_params())
        return CheckoutSession(id=session.id, url=session.url)
