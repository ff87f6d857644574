import threading
from decimal import Decimal
from typing import List

from app.data.models.item import ItemModel


class ItemRepo:
    def __init__(self):
        self._items: List[ItemModel] = []
        self.lock = threading.RLock()

    def get_item(self, item_id: int) -> ItemModel | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def create_item(self, name: str, price: Decimal, description: str = "") -> ItemModel:
        with self.lock:
            next_id = max((i.id for i in self._items), default=0) + 1
            item = ItemModel(id=next_id, name=name, price=price, description=description)
            self._items.append(item)
            return item

    def list_items(self) -> List[ItemModel]:
        return list(self._items)
