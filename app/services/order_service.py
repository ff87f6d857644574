# app/services/order_service.py
from decimal import Decimal
from typing import Any, Iterable, List

from app.data.models.order import OrderItemModel, OrderModel
from app.exceptions import BadRequestException
from app.repos.order_repo import OrderRepo
from app.services.cart_service import is_valid_id
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _field(item: Any, name: str):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def snapshot_items(items: Iterable[Any]) -> tuple:
    """Kopia pozycji (dict, model koszyka albo schema) niezalezna od zrodla."""
    snapshot = []
    for item in items:
        item_id = _field(item, "item_id")
        quantity = _field(item, "quantity")
        if not is_valid_id(item_id) or not isinstance(quantity, int):
            raise BadRequestException("items must contain item_id and quantity")
        snapshot.append(OrderItemModel(item_id=item_id, quantity=quantity))
    return tuple(snapshot)


class OrderService:
    """
    Ledger zamowien: tylko dopisywanie, brak update/delete.
    """

    def __init__(self, repo: OrderRepo):
        self.repo = repo

    def create(
        self,
        user_id: int,
        cart_id: int,
        items: Iterable[Any] | None,
        total: Decimal | None = None,
    ) -> OrderModel:
        """
        Use Case: zapis zamowienia.

        total przyjmujemy tak jak przyszedl od klienta, bez przeliczania po cenach katalogu.
        """
        if not is_valid_id(user_id) or not is_valid_id(cart_id) or items is None:
            raise BadRequestException("user_id, cart_id, and items required")

        snapshot = snapshot_items(items)

        with self.repo.lock:
            order = OrderModel(
                id=self.repo.next_id(),
                user_id=user_id,
                cart_id=cart_id,
                items=snapshot,
                total=total,
            )
            self.repo.add_order(order)

        logger.info(f"Order {order.id} created for user {user_id} from cart {cart_id}")
        return order

    def list_all(self) -> List[OrderModel]:
        return self.repo.list_orders()
