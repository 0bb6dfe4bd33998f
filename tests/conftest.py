import time

import pytest
import stripe

from app import create_app
from app.config import TestConfig
from app.model import CheckoutSession, Coupon, PromotionCode


def make_promo(promo_id="promo_1", code="SUMMER10", active=True, expires_at=None,
               percent_off=None, amount_off=None, min_amount=None) -> PromotionCode:
    return PromotionCode(
        id=promo_id,
        code=code,
        active=active,
        expires_at=expires_at,
        coupon=Coupon(id=f"co_{promo_id}", percent_off=percent_off,
                      amount_off=amount_off, min_amount=min_amount),
    )


def hours_from_now(hours: float) -> int:
    return int(time.time() + hours * 3600)


class FakeProcessor:
    """In-memory stand-in for StripeProcessor."""

    def __init__(self, promotions=()):
        self.promotions = {p.id: p for p in promotions}
        self.calls = []
        self.sessions = []
        self.list_error = None
        self.retrieve_error = None
        self.create_error = None

    def add(self, promo: PromotionCode):
        self.promotions[promo.id] = promo
        return promo

    def find_active_promotion(self, code):
        self.calls.append(("list", code))
        if self.list_error:
            raise self.list_error
        for promo in self.promotions.values():
            if promo.code == code and promo.active:
                return promo
        return None

    def retrieve_promotion(self, promotion_code_id):
        self.calls.append(("retrieve", promotion_code_id))
        if self.retrieve_error:
            raise self.retrieve_error
        try:
            return self.promotions[promotion_code_id]
        except KeyError:
            raise stripe.InvalidRequestError(
                f"No such promotion code: '{promotion_code_id}'", "promotion_code"
            )

    def create_checkout_session(self, request):
        self.calls.append(("create", request))
        if self.create_error:
            raise self.create_error
        self.sessions.append(request)
        n = len(self.sessions)
        return CheckoutSession(id=f"cs_test_{n}", url=f"https://checkout.stripe.com/c/pay/cs_test_{n}")

    @property
    def last_session(self):
        return self.sessions[-1] if self.sessions else None


@pytest.fixture
def processor():
    return FakeProcessor()


@pytest.fixture
def app(processor):
    return create_app(TestConfig, processor=processor)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def urls():
    from app.services.checkout_service import RedirectUrls
    return RedirectUrls(
        success_url="https://rentals.example.com/success?session_id={CHECKOUT_SESSION_ID}",
        cancel_url="https://rentals.example.com/cancel",
    )
