# ------ app/model/__init__.py ------

from .booking import BookingRequest
from .coupon import Coupon, PromotionCode, DiscountResult
from .session import LineItem, CheckoutSessionRequest, CheckoutSession

__all__ = [
    "BookingRequest",
    "Coupon",
    "PromotionCode",
    "DiscountResult",
    "LineItem",
    "CheckoutSessionRequest",
    "CheckoutSession",
]
