# app/data/store.py
from dataclasses import dataclass, field

from app.repos.cart_repo import CartRepo
from app.repos.item_repo import ItemRepo
from app.repos.order_repo import OrderRepo
from app.repos.user_repo import UserRepo
from app.services.lock_service import LockService


@dataclass
class Store:
    """Caly stan aplikacji w pamieci procesu. Znika po restarcie."""

    carts: CartRepo = field(default_factory=CartRepo)
    orders: OrderRepo = field(default_factory=OrderRepo)
    users: UserRepo = field(default_factory=UserRepo)
    items: ItemRepo = field(default_factory=ItemRepo)
    locks: LockService = field(default_factory=LockService)


def build_store(seed_catalog: bool = False) -> Store:
    store = Store()
    if seed_catalog:
        from app.data.seed import seed

        seed(store)
    return store
