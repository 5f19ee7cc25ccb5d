"""Integration tests for the UpdateSale use case."""

import uuid
from dataclasses import fields
from datetime import datetime
from decimal import Decimal

import pytest

from soms.application.dto import UpdateSaleCommand
from soms.application.update_sale import UpdateSaleHandler
from soms.domain.events import SaleModified
from soms.domain.exceptions import DependencyError, EntityNotFoundError, ValidationError
from soms.domain.model.value_objects import Money
from tests.application.helpers import GADGET, item_spec, stored_sale
from tests.fakes import (
    BrokenCache,
    BrokenSaleRepository,
    FakeSaleRepository,
    RecordingCache,
    RecordingPublisher,
)


def _setup(sales=None, repo=None, cache=None):
    journal: list[str] = []
    if repo is None:
        repo = FakeSaleRepository(sales)
    repo.journal = journal
    cache = cache or RecordingCache()
    cache.journal = journal
    publisher = RecordingPublisher(journal)
    handler = UpdateSaleHandler(repo, cache, publisher)
    return handler, repo, cache, publisher, journal


class TestPartialUpdate:

    async def test_only_supplied_fields_change(self):
        sale = stored_sale()
        handler, repo, _, _, _ = _setup([sale])

        result = await handler.handle(UpdateSaleCommand(id=sale.id, customer="New Customer"))

        saved = repo.stored(sale.id)
        assert saved.customer == "New Customer"
        assert saved.sale_number == sale.sale_number
        assert saved.branch == sale.branch
        assert saved.sale_date == sale.sale_date
        assert result.id == sale.id
        assert result.sale_number == sale.sale_number

    async def test_all_header_fields(self):
        sale = stored_sale()
        handler, repo, _, _, _ = _setup([sale])

        await handler.handle(
            UpdateSaleCommand(
                id=sale.id,
                sale_number="S-9999",
                sale_date=datetime(2025, 2, 2),
                customer="Carol",
                branch="North",
            )
        )

        saved = repo.stored(sale.id)
        assert (saved.sale_number, saved.customer, saved.branch) == ("S-9999", "Carol", "North")
        assert saved.sale_date == datetime(2025, 2, 2)

    async def test_total_unchanged_when_items_untouched(self):
        sale = stored_sale(qty=5, price="20")
        handler, repo, _, _, _ = _setup([sale])

        await handler.handle(UpdateSaleCommand(id=sale.id, branch="East"))

        saved = repo.stored(sale.id)
        assert saved.total_sale_amount == Money.of("90.00")
        assert saved.total_sale_amount == sum(
            (i.total_amount for i in saved.items), Money.zero()
        )

    async def test_replacing_items_recomputes_discounts(self):
        sale = stored_sale(qty=1, price="10")
        handler, repo, _, _, _ = _setup([sale])

        await handler.handle(
            UpdateSaleCommand(
                id=sale.id,
                items=[item_spec(10, "100.00"), item_spec(4, "5", product=GADGET)],
            )
        )

        saved = repo.stored(sale.id)
        assert [i.discount for i in saved.items] == [Decimal("0.20"), Decimal("0.10")]
        assert saved.total_sale_amount == Money.of("818.00")

    def test_command_has_no_total_field(self):
        names = {f.name for f in fields(UpdateSaleCommand)}
        assert "total_sale_amount" not in names
        with pytest.raises(TypeError):
            UpdateSaleCommand(id=uuid.uuid4(), total_sale_amount=Decimal("1"))


class TestSideEffects:

    async def test_persist_then_invalidate_then_publish(self):
        sale = stored_sale()
        handler, _, cache, publisher, journal = _setup([sale])

        await handler.handle(UpdateSaleCommand(id=sale.id, branch="West"))

        assert journal == [
            "repo.update",
            f"cache.remove:sale_{sale.id}",
            "cache.remove:sale_list",
            "publish:sale.modified",
        ]
        assert cache.removed == [f"sale_{sale.id}", "sale_list"]
        assert isinstance(publisher.events[0], SaleModified)
        assert publisher.events[0].sale_id == sale.id

    async def test_side_effects_even_when_nothing_changes(self):
        sale = stored_sale()
        handler, _, cache, publisher, _ = _setup([sale])

        await handler.handle(UpdateSaleCommand(id=sale.id))

        assert len(cache.removed) == 2
        assert len(publisher.events) == 1


class TestUpdateFailures:

    async def test_unknown_id_touches_nothing(self):
        handler, _, cache, publisher, journal = _setup()

        with pytest.raises(EntityNotFoundError):
            await handler.handle(UpdateSaleCommand(id=uuid.uuid4(), customer="Nobody"))

        assert cache.removed == []
        assert publisher.events == []
        assert journal == []

    async def test_invalid_fields_rejected_before_lookup(self):
        sale = stored_sale()
        handler, repo, _, publisher, _ = _setup([sale])

        with pytest.raises(ValidationError) as excinfo:
            await handler.handle(
                UpdateSaleCommand(id=sale.id, sale_number="ab", items=[item_spec(21)])
            )

        assert set(excinfo.value.fields()) == {"sale_number", "items[0].quantity"}
        assert repo.stored(sale.id).sale_number == sale.sale_number
        assert publisher.events == []

    async def test_persist_failure_stops_pipeline(self):
        sale = stored_sale()
        handler, _, cache, publisher, _ = _setup(repo=BrokenSaleRepository([sale]))

        with pytest.raises(DependencyError):
            await handler.handle(UpdateSaleCommand(id=sale.id, customer="Dave"))

        assert cache.removed == []
        assert publisher.events == []

    async def test_cache_failure_stops_before_publish(self):
        sale = stored_sale()
        handler, repo, _, publisher, _ = _setup([sale], cache=BrokenCache())

        with pytest.raises(DependencyError):
            await handler.handle(UpdateSaleCommand(id=sale.id, customer="Erin"))

        assert repo.stored(sale.id).customer == "Erin"
        assert publisher.events == []
