from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_store, require_credential
from app.data.store import Store
from app.domain.schemas import ItemIn, ItemOut
from app.services.item_service import ItemService

router = APIRouter(prefix="/items", tags=["items"])


def get_service(store: Store = Depends(get_store)) -> ItemService:
    return ItemService(store.items)


@router.get("", response_model=List[ItemOut])
def list_items(svc: ItemService = Depends(get_service)):
    return svc.list_items()


@router.post(
    "",
    response_model=ItemOut,
    status_code=201,
    dependencies=[Depends(require_credential)],
)
def create_item(payload: ItemIn, svc: ItemService = Depends(get_service)):
    return svc.create_item(payload.name, payload.price, payload.description)
