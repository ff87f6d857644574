"""Cart store rules: lazy creation, merge-on-add, list-all and clear."""

import pytest

from app.exceptions import BadRequestException, NotFoundException
from app.repos.cart_repo import CartRepo
from app.services.cart_service import CartService


@pytest.fixture()
def service():
    return CartService(CartRepo())


class TestAddItem:
    def test_first_add_creates_cart(self, service):
        cart = service.add_item(user_id=7, item_id=1)

        assert cart.id == 1
        assert cart.user_id == 7
        assert [(i.item_id, i.quantity) for i in cart.items] == [(1, 1)]
        assert cart.created_at is not None

    def test_repeated_adds_accumulate_quantity(self, service):
        service.add_item(7, 1, 1)
        cart = service.add_item(7, 1, 2)

        assert len(cart.items) == 1
        assert cart.items[0].item_id == 1
        assert cart.items[0].quantity == 3

    def test_quantity_is_sum_of_all_adds(self, service):
        quantities = [1, 4, 2, 10, 3]
        for q in quantities:
            cart = service.add_item(3, 5, q)

        assert cart.items[0].quantity == sum(quantities)

    def test_new_items_keep_insertion_order(self, service):
        service.add_item(7, 3)
        service.add_item(7, 1)
        cart = service.add_item(7, 3)

        assert [i.item_id for i in cart.items] == [3, 1]

    def test_one_cart_per_user(self, service):
        for item_id in (1, 2, 3):
            service.add_item(7, item_id)
        service.add_item(8, 1)

        user_ids = [c.user_id for c in service.list_all()]
        assert sorted(user_ids) == [7, 8]

    def test_cart_ids_increase_per_new_user(self, service):
        first = service.add_item(1, 1)
        second = service.add_item(2, 1)

        assert second.id > first.id

    def test_zero_and_negative_quantity_accepted(self, service):
        service.add_item(7, 1, 5)
        cart = service.add_item(7, 1, -2)
        assert cart.items[0].quantity == 3

        cart = service.add_item(7, 2, 0)
        assert cart.items[1].quantity == 0

    @pytest.mark.parametrize(
        "user_id,item_id",
        [(None, 1), (7, None), (0, 1), ("7", 1), (True, 1)],
    )
    def test_missing_or_malformed_ids_rejected(self, service, user_id, item_id):
        with pytest.raises(BadRequestException):
            service.add_item(user_id, item_id)

        assert service.list_all() == []


class TestClear:
    def test_clear_keeps_cart_with_no_items(self, service):
        created = service.add_item(7, 1, 2)

        service.clear(7)

        carts = service.list_all()
        assert len(carts) == 1
        assert carts[0].id == created.id
        assert carts[0].user_id == 7
        assert carts[0].items == []

    def test_clear_unknown_user_raises_not_found(self, service):
        service.add_item(7, 1)

        with pytest.raises(NotFoundException):
            service.clear(999)

        assert len(service.list_all()[0].items) == 1

    def test_cart_is_reused_after_clear(self, service):
        created = service.add_item(7, 1)
        service.clear(7)

        cart = service.add_item(7, 2)

        assert cart.id == created.id
        assert [i.item_id for i in cart.items] == [2]
