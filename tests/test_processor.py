from datetime import date
from unittest.mock import MagicMock

from app.model import BookingRequest, DiscountResult
from app.services.checkout_service import build_session_request
from app.services.processor import StripeProcessor, promotion_from_stripe
from app.utils.money import D


def _stripe_promo(**overrides):
    data = {
        "id": "promo_1",
        "object": "promotion_code",
        "code": "SUMMER10",
        "active": True,
        "expires_at": None,
        "coupon": {"id": "co_1", "percent_off": 10.0, "amount_off": None},
        "restrictions": {"minimum_amount": None},
    }
    data.update(overrides)
    return data


def test_promotion_mapping():
    promo = promotion_from_stripe(_stripe_promo(expires_at=1700000000))
    assert promo.id == "promo_1"
    assert promo.code == "SUMMER10"
    assert promo.active is True
    assert promo.expires_at == 1700000000
    assert promo.coupon.percent_off == 10.0
    assert promo.coupon.amount_off is None
    assert promo.coupon.min_amount is None


def test_minimum_read_from_restrictions_or_coupon():
    promo = promotion_from_stripe(_stripe_promo(restrictions={"minimum_amount": 10000}))
    assert promo.coupon.min_amount == 10000
    legacy = _stripe_promo(coupon={"id": "co_1", "amount_off": 500, "min_amount": 2000})
    assert promotion_from_stripe(legacy).coupon.min_amount == 2000


def test_find_active_promotion_queries_exact_active_single():
    client = MagicMock()
    client.promotion_codes.list.return_value = MagicMock(data=[_stripe_promo()])
    promo = StripeProcessor(client).find_active_promotion("SUMMER10")
    client.promotion_codes.list.assert_called_once_with(
        params={"code": "SUMMER10", "active": True, "limit": 1}
    )
    assert promo.id == "promo_1"


def test_find_active_promotion_none():
    client = MagicMock()
    client.promotion_codes.list.return_value = MagicMock(data=[])
    assert StripeProcessor(client).find_active_promotion("NOPE") is None


def test_retrieve_promotion():
    client = MagicMock()
    client.promotion_codes.retrieve.return_value = _stripe_promo(active=False)
    promo = StripeProcessor(client).retrieve_promotion("promo_1")
    client.promotion_codes.retrieve.assert_called_once_with("promo_1")
    assert promo.active is False


def test_create_checkout_session_sends_params(urls):
    client = MagicMock()
    client.checkout.sessions.create.return_value = MagicMock(id="cs_1", url="https://checkout.stripe.com/x")
    booking = BookingRequest(total=D("200"), checkin=date(2024, 7, 1), checkout=date(2024, 7, 2))
    request = build_session_request(booking, DiscountResult.none(booking.total), urls,
                                    promotion_code_id="promo_1")

    session = StripeProcessor(client).create_checkout_session(request)

    assert (session.id, session.url) == ("cs_1", "https://checkout.stripe.com/x")
    params = client.checkout.sessions.create.call_args.kwargs["params"]
    assert params["mode"] == "payment"
    assert params["line_items"][0]["quantity"] == 1
    assert params["line_items"][0]["price_data"]["product_data"]["description"] == \
        "Short-term rental stay, 1 night"
    assert params["discounts"] == [{"promotion_code": "promo_1"}]
