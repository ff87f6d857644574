# app/repos/order_repo.py
import itertools
import threading
from typing import List

from app.data.models.order import OrderModel


class OrderRepo:
    def __init__(self):
        self._orders: List[OrderModel] = []
        self._ids = itertools.count(1)
        self.lock = threading.RLock()

    def next_id(self) -> int:
        return next(self._ids)

    def add_order(self, order: OrderModel) -> OrderModel:
        with self.lock:
            self._orders.append(order)
            return order

    def list_orders(self) -> List[OrderModel]:
        return list(self._orders)
