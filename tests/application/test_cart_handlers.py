"""Integration tests for the Cart use cases."""

import uuid
from datetime import datetime

import pytest

from soms.application.create_cart import CreateCartHandler
from soms.application.delete_cart import DeleteCartHandler
from soms.application.dto import (
    CartItemSpec,
    CreateCartCommand,
    DeleteCartCommand,
    GetCartCommand,
    ListCartsCommand,
    UpdateCartCommand,
)
from soms.application.list_carts import ListCartsHandler
from soms.application.show_cart import ShowCartHandler
from soms.application.update_cart import UpdateCartHandler
from soms.domain.events import CartCreated, CartDeleted, CartModified
from soms.domain.exceptions import EntityNotFoundError, ValidationError
from soms.domain.model.cart import Cart, CartItem
from soms.domain.model.value_objects import Quantity
from tests.fakes import FakeCartRepository, RecordingCache, RecordingPublisher

USER = uuid.UUID("00000000-0000-0000-0000-000000000001")
PRODUCT = uuid.uuid4()


def _cart(user: uuid.UUID = USER) -> Cart:
    return Cart(
        id=uuid.uuid4(),
        user_id=user,
        date=datetime(2024, 6, 1),
        items=[CartItem(product_id=PRODUCT, quantity=Quantity(2))],
    )


class TestCreateCart:

    async def test_persists_and_publishes(self):
        repo = FakeCartRepository()
        publisher = RecordingPublisher(repo.journal)
        command = CreateCartCommand(
            user_id=USER,
            date=datetime(2024, 6, 1),
            items=[CartItemSpec(PRODUCT, 3)],
        )

        result = await CreateCartHandler(repo, publisher).handle(command)

        cart = repo.stored(result.id)
        assert cart.user_id == USER
        assert [item.quantity.value for item in cart.items] == [3]
        assert repo.journal == ["repo.create", "publish:cart.created"]
        assert isinstance(publisher.events[0], CartCreated)

    async def test_invalid_cart_rejected(self):
        repo = FakeCartRepository()
        publisher = RecordingPublisher()
        command = CreateCartCommand(user_id=uuid.UUID(int=0), date=datetime.min)
        with pytest.raises(ValidationError) as excinfo:
            await CreateCartHandler(repo, publisher).handle(command)
        assert excinfo.value.fields() == ["user_id", "date"]
        assert publisher.events == []


class TestQueries:

    async def test_show_cart(self):
        cart = _cart()
        dto = await ShowCartHandler(FakeCartRepository([cart])).handle(GetCartCommand(cart.id))
        assert dto.id == cart.id
        assert dto.items[0].quantity == 2

    async def test_show_unknown_cart(self):
        with pytest.raises(EntityNotFoundError):
            await ShowCartHandler(FakeCartRepository()).handle(GetCartCommand(uuid.uuid4()))

    async def test_list_carts(self):
        repo = FakeCartRepository([_cart() for _ in range(7)])
        page = await ListCartsHandler(repo).handle(ListCartsCommand(page=2, size=5))
        assert len(page.items) == 2
        assert page.total_pages == 2
        assert page.total_count == 7


class TestUpdateCart:

    async def test_invalidates_cart_keys_then_publishes(self):
        cart = _cart()
        repo = FakeCartRepository([cart])
        cache = RecordingCache(repo.journal)
        publisher = RecordingPublisher(repo.journal)
        new_user = uuid.uuid4()

        result = await UpdateCartHandler(repo, cache, publisher).handle(
            UpdateCartCommand(id=cart.id, user_id=new_user)
        )

        assert result.id == cart.id
        saved = repo.stored(cart.id)
        assert saved.user_id == new_user
        assert saved.date == cart.date
        assert repo.journal == [
            "repo.update",
            f"cache.remove:cart_{cart.id}",
            "cache.remove:carts_list",
            "publish:cart.modified",
        ]
        assert isinstance(publisher.events[0], CartModified)

    async def test_replaces_items(self):
        cart = _cart()
        repo = FakeCartRepository([cart])
        handler = UpdateCartHandler(repo, RecordingCache(), RecordingPublisher())

        await handler.handle(
            UpdateCartCommand(id=cart.id, items=[CartItemSpec(PRODUCT, 5), CartItemSpec(PRODUCT, 1)])
        )

        assert [item.quantity.value for item in repo.stored(cart.id).items] == [5, 1]

    async def test_unknown_cart(self):
        cache = RecordingCache()
        publisher = RecordingPublisher()
        handler = UpdateCartHandler(FakeCartRepository(), cache, publisher)
        with pytest.raises(EntityNotFoundError):
            await handler.handle(UpdateCartCommand(id=uuid.uuid4(), date=datetime(2024, 1, 1)))
        assert cache.removed == []
        assert publisher.events == []


class TestDeleteCart:

    async def test_delete_publishes(self):
        cart = _cart()
        repo = FakeCartRepository([cart])
        publisher = RecordingPublisher()

        result = await DeleteCartHandler(repo, publisher).handle(DeleteCartCommand(cart.id))

        assert result.success
        assert repo.stored(cart.id) is None
        assert isinstance(publisher.events[0], CartDeleted)

    async def test_nil_id_rejected(self):
        with pytest.raises(ValidationError):
            await DeleteCartHandler(FakeCartRepository(), RecordingPublisher()).handle(
                DeleteCartCommand(uuid.UUID(int=0))
            )
