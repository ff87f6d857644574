# app/repos/cart_repo.py
import itertools
import threading
from typing import Dict, List

from app.data.models.cart import CartModel


class CartRepo:
    """Koszyki w pamieci procesu, klucz to user_id (max jeden koszyk na usera)."""

    def __init__(self):
        self._carts: Dict[int, CartModel] = {}
        self._ids = itertools.count(1)
        self.lock = threading.RLock()

    def get_cart_by_user(self, user_id: int) -> CartModel | None:
        return self._carts.get(user_id)

    def create_cart(self, user_id: int) -> CartModel:
        with self.lock:
            cart = CartModel(id=next(self._ids), user_id=user_id)
            self._carts[user_id] = cart
            return cart

    def list_carts(self) -> List[CartModel]:
        # dict trzyma kolejnosc wstawiania = kolejnosc tworzenia koszykow
        return list(self._carts.values())
