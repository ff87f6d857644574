from dataclasses import dataclass
from decimal import Decimal


@dataclass
class ItemModel:
    id: int
    name: str
    price: Decimal
    description: str = ""
