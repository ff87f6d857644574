from decimal import Decimal
from typing import List

from app.data.models.item import ItemModel
from app.exceptions import BadRequestException, NotFoundException
from app.repos.item_repo import ItemRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ItemService:
    def __init__(self, repo: ItemRepo):
        self.repo = repo

    def list_items(self) -> List[ItemModel]:
        return self.repo.list_items()

    def get_item(self, item_id: int) -> ItemModel:
        item = self.repo.get_item(item_id)
        if not item:
            raise NotFoundException("Item not found")
        return item

    def create_item(self, name: str | None, price: Decimal | None, description: str | None = "") -> ItemModel:
        if not name or price is None:
            raise BadRequestException("Name and price required")

        item = self.repo.create_item(name=name, price=Decimal(str(price)), description=description or "")
        logger.info(f"Catalog item {item.id} ({name}) added")
        return item
