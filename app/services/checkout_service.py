# app/services/checkout_service.py
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

from app.data.models.order import OrderModel
from app.exceptions import ConflictException, NotFoundException
from app.services.cart_service import CartService
from app.services.lock_service import LockService
from app.services.order_service import OrderService
from app.utils.settings import CHECKOUT_LOCK_TIMEOUT_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutState(str, Enum):
    PRICED = "PRICED"
    ORDER_CREATED = "ORDER_CREATED"
    CART_CLEARED = "CART_CLEARED"
    FAILED = "FAILED"


@dataclass
class CheckoutResult:
    order: OrderModel
    state: CheckoutState
    cart_cleared: bool
    detail: str | None = None


class CheckoutService:
    """
    Checkout: PRICED -> ORDER_CREATED -> CART_CLEARED, albo FAILED.

    Zamowienie i czyszczenie koszyka to dwa osobne kroki bez rollbacku.
    Jesli czyszczenie sie nie uda, zamowienie zostaje (partial failure,
    state=ORDER_CREATED, cart_cleared=False). Checkouty jednego usera
    sa serializowane przez LockService.
    """

    def __init__(
        self,
        cart_service: CartService,
        order_service: OrderService,
        lock_service: LockService,
        lock_timeout: float = CHECKOUT_LOCK_TIMEOUT_SECONDS,
    ):
        self.cart_service = cart_service
        self.order_service = order_service
        self.lock_service = lock_service
        self.lock_timeout = lock_timeout

    def checkout(
        self,
        user_id: int,
        items: Iterable[Any] | None,
        total: Decimal | None = None,
    ) -> CheckoutResult:
        if not self.lock_service.acquire_user_lock(user_id, timeout=self.lock_timeout):
            logger.warning(f"Checkout uzytkownika {user_id}: {CheckoutState.FAILED.value}, lock zajety")
            raise ConflictException("Checkout already in progress")

        try:
            return self._run(user_id, items, total)
        finally:
            self.lock_service.release_user_lock(user_id)

    def _run(self, user_id: int, items, total) -> CheckoutResult:
        try:
            cart = self.cart_service.get_cart(user_id)
        except NotFoundException:
            logger.warning(f"Checkout uzytkownika {user_id}: {CheckoutState.FAILED.value}, brak koszyka")
            raise

        # cena i pozycje przychodza od klienta, ufamy im
        state = CheckoutState.PRICED
        logger.info(f"Checkout uzytkownika {user_id}, koszyk {cart.id}: {state.value}, total={total}")

        try:
            order = self.order_service.create(user_id, cart.id, items, total)
        except Exception:
            logger.warning(f"Checkout uzytkownika {user_id}: {CheckoutState.FAILED.value}, zamowienie nie zapisane")
            raise

        state = CheckoutState.ORDER_CREATED
        logger.info(f"Checkout uzytkownika {user_id}: {state.value}, zamowienie {order.id}")

        try:
            self.cart_service.clear(user_id)
        except NotFoundException as e:
            logger.warning(
                f"Checkout uzytkownika {user_id}: zamowienie {order.id} zapisane, "
                f"ale koszyk nie zostal wyczyszczony ({e.message})"
            )
            return CheckoutResult(
                order=order,
                state=state,
                cart_cleared=False,
                detail=f"Order created but cart was not cleared: {e.message}",
            )

        state = CheckoutState.CART_CLEARED
        logger.info(f"Checkout uzytkownika {user_id}: {state.value}")
        return CheckoutResult(order=order, state=state, cart_cleared=True)
