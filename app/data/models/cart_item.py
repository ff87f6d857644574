from dataclasses import dataclass


@dataclass
class CartItemModel:
    item_id: int
    quantity: int
