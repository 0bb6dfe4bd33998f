# --- app/model/session.py ---

from dataclasses import dataclass, field

@dataclass(frozen=True)
class LineItem:
    name: str
    description: str
    unit_amount: int                   # minor units
    quantity: int = 1
    currency: str = "usd"

@dataclass(frozen=True)
class CheckoutSessionRequest:
    line_item: LineItem
    success_url: str
    cancel_url: str
    metadata: dict = field(default_factory=dict)
    promotion_code_id: str | None = None
    mode: str = "payment"

    def to_params(self) -> dict:
        """Parameters for stripe `checkout.sessions.create`."""
        params = {
            "payment_method_types": ["card"],
            "line_items": [{
                "price_data": {
                    "currency": self.line_item.currency,
                    "product_data": {
                        "name": self.line_item.name,
                        "description": self.line_item.description,
                    },
                    "unit_amount": self.line_item.unit_amount,
                },
                "quantity": self.line_item.quantity,
            }],
            "mode": self.mode,
            "success_url": self.success_url,
            "cancel_url": self.cancel_url,
            "metadata": dict(self.metadata),
        }
        if self.promotion_code_id:
            params["discounts"] = [{"promotion_code": self.promotion_code_id}]
        return params

@dataclass(frozen=True)
class CheckoutSession:
    id: str
    url: str
