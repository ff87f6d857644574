#app/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_store, require_credential
from app.data.store import Store
from app.domain.schemas import AddToCartIn, CartOut, MessageOut
from app.exceptions import BadRequestException
from app.services.cart_service import CartService

router = APIRouter(
    prefix="/carts",
    tags=["carts"],
    dependencies=[Depends(require_credential)],
)


def get_service(store: Store = Depends(get_store)) -> CartService:
    return CartService(store.carts)


@router.post("", response_model=CartOut)
def add_to_cart(payload: AddToCartIn, svc: CartService = Depends(get_service)):
    return svc.add_item(
        user_id=payload.user_id,
        item_id=payload.item_id,
        quantity=payload.quantity,
    )


@router.get("", response_model=List[CartOut])
def list_carts(svc: CartService = Depends(get_service)):
    return svc.list_all()


@router.delete("", response_model=MessageOut)
def clear_cart(
    user_id: str | None = Query(default=None, alias="userId"),
    svc: CartService = Depends(get_service),
):
    if not user_id:
        raise BadRequestException("userId required")
    try:
        parsed = int(user_id)
    except ValueError:
        raise BadRequestException("userId must be an integer")

    svc.clear(parsed)
    return {"message": "Cart cleared"}
