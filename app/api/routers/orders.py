# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_store, require_credential
from app.data.store import Store
from app.domain.schemas import OrderCreate, OrderOut
from app.services.order_service import OrderService

router = APIRouter(
    prefix="/orders",
    tags=["orders"],
    dependencies=[Depends(require_credential)],
)


def get_service(store: Store = Depends(get_store)) -> OrderService:
    return OrderService(store.orders)


@router.post("", response_model=OrderOut, status_code=201)
def create_order(payload: OrderCreate, svc: OrderService = Depends(get_service)):
    """
    Zapisuje zamowienie w ledgerze. Total jak podal klient.
    """
    return svc.create(
        user_id=payload.user_id,
        cart_id=payload.cart_id,
        items=payload.items,
        total=payload.total,
    )


@router.get("", response_model=List[OrderOut])
def list_orders(svc: OrderService = Depends(get_service)):
    return svc.list_all()
