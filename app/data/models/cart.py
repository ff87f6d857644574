#app/data/models/cart.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from app.data.models.cart_item import CartItemModel


@dataclass
class CartModel:
    id: int
    user_id: int
    items: List[CartItemModel] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def find_item(self, item_id: int) -> CartItemModel | None:
        for item in self.items:
            if item.item_id == item_id:
                return item
        return None
