# app/api/routers/checkout.py
from fastapi import APIRouter, Depends

from app.api.deps import get_store, require_credential
from app.data.store import Store
from app.domain.schemas import CheckoutIn, CheckoutOut
from app.services.cart_service import CartService
from app.services.checkout_service import CheckoutService
from app.services.order_service import OrderService

router = APIRouter(
    prefix="/checkout",
    tags=["checkout"],
    dependencies=[Depends(require_credential)],
)


def get_service(store: Store = Depends(get_store)) -> CheckoutService:
    return CheckoutService(
        cart_service=CartService(store.carts),
        order_service=OrderService(store.orders),
        lock_service=store.locks,
    )


@router.post("", response_model=CheckoutOut, status_code=201)
def checkout(payload: CheckoutIn, svc: CheckoutService = Depends(get_service)):
    """
    Zamowienie z aktualnego koszyka usera, potem czyszczenie koszyka.
    cart_cleared=False oznacza, ze zamowienie zapisano, ale koszyk zostal.
    """
    return svc.checkout(
        user_id=payload.user_id,
        items=payload.items,
        total=payload.total,
    )
