from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class OrderItemModel:
    item_id: int
    quantity: int


# zamowienie jest niemutowalne, items to kopia (snapshot) pozycji koszyka
@dataclass(frozen=True)
class OrderModel:
    id: int
    user_id: int
    cart_id: int
    items: Tuple[OrderItemModel, ...]
    total: Decimal | None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
