# --- app/model/booking.py ---

from dataclasses import dataclass
from datetime import date

from ..utils.money import Money

@dataclass(frozen=True)
class BookingRequest:
    total: Money
    checkin: date | None
    checkout: date | None
    promo_code: str | None = None
    promo_code_id: str | None = None
    contact_id: str | None = None

    @property
    def nights(self) -> int:
        if not self.checkin or not self.checkout:
            return 0
        return (self.checkout - self.checkin).days
