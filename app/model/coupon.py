# --- app/model/coupon.py ---

from dataclasses import dataclass
from datetime import datetime, timezone

from ..utils.money import Money, D

@dataclass(frozen=True)
class Coupon:
    id: str | None = None
    percent_off: float | None = None   # 0-100
    amount_off: int | None = None      # minor units
    min_amount: int | None = None      # minor units

    @property
    def kind(self) -> str | None:
        # percent wins when a coupon carries both
        if self.percent_off:
            return "percent"
        if self.amount_off:
            return "fixed"
        return None

@dataclass(frozen=True)
class PromotionCode:
    id: str
    code: str
    active: bool
    coupon: Coupon
    expires_at: int | None = None      # unix seconds

    def is_expired(self, now: datetime | None = None) -> bool:
        if not self.expires_at:
            return False
        now = now or datetime.now(timezone.utc)
        return self.expires_at < now.timestamp()

@dataclass(frozen=True)
class DiscountResult:
    discount: Money
    adjusted_total: Money
    promo_code_id: str | None = None

    @classmethod
    def none(cls, base_total) -> "DiscountResult":
        return cls(discount=D(0), adjusted_total=D(base_total))
