from typing import List

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.exceptions import BadRequestException, NotFoundException
from app.repos.cart_repo import CartRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def is_valid_id(value) -> bool:
    # 0 traktujemy jak brak wartosci, bool to nie id
    return isinstance(value, int) and not isinstance(value, bool) and value != 0


class CartService:
    """
    Use case'y koszyka:
    commands (add_item, clear) modyfikuja stan
    query (get_cart, list_all) tylko odczyt
    """

    def __init__(self, repo: CartRepo):
        self.repo = repo

    #query - odczyt
    def list_all(self) -> List[CartModel]:
        # bez filtrowania po wywolujacym, zwraca koszyki wszystkich userow
        return self.repo.list_carts()

    def get_cart(self, user_id: int) -> CartModel:
        cart = self.repo.get_cart_by_user(user_id)
        if not cart:
            raise NotFoundException("Cart not found")
        return cart

    #commands
    def add_item(self, user_id: int, item_id: int, quantity: int = 1) -> CartModel:
        if not is_valid_id(user_id) or not is_valid_id(item_id):
            raise BadRequestException("user_id and item_id required")

        if quantity is None:
            quantity = 1

        with self.repo.lock:
            cart = self.repo.get_cart_by_user(user_id)

            if not cart:
                cart = self.repo.create_cart(user_id)
                logger.info(f"Utworzono nowy koszyk {cart.id} dla uzytkownika {user_id}")

            existing_item = cart.find_item(item_id)

            if existing_item:
                logger.info(
                    f"Produkt {item_id} juz jest w koszyku {cart.id}, zwiekszam ilosc "
                    f"z {existing_item.quantity} do {existing_item.quantity + quantity}"
                )
                existing_item.quantity += quantity
            else:
                logger.info(f"Dodaje nowy produkt {item_id} do koszyka {cart.id}")
                cart.items.append(CartItemModel(item_id=item_id, quantity=quantity))

            return cart

    def clear(self, user_id: int) -> CartModel:
        with self.repo.lock:
            cart = self.repo.get_cart_by_user(user_id)

            if not cart:
                raise NotFoundException("Cart not found")

            # koszyk zostaje (to samo id), tylko pozycje znikaja
            cart.items = []
            logger.info(f"Koszyk {cart.id} uzytkownika {user_id} wyczyszczony")
            return cart
