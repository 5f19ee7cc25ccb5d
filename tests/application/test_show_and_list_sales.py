"""Integration tests for the ShowSale and ListSales queries."""

import uuid
from decimal import Decimal

import pytest

from soms.application.dto import GetSaleCommand, ListSalesCommand
from soms.application.list_sales import ListSalesHandler
from soms.application.show_sale import ShowSaleHandler
from soms.application.validation import NIL_ID
from soms.domain.exceptions import EntityNotFoundError, ValidationError
from tests.application.helpers import stored_sale
from tests.fakes import FakeSaleRepository


class TestShowSale:

    async def test_returns_full_projection(self):
        sale = stored_sale(qty=4, price="25.00")
        handler = ShowSaleHandler(FakeSaleRepository([sale]))

        dto = await handler.handle(GetSaleCommand(id=sale.id))

        assert dto.id == sale.id
        assert dto.sale_number == sale.sale_number
        assert dto.customer == "Existing Customer"
        assert dto.items[0].discount == Decimal("0.10")
        assert dto.items[0].total_amount == Decimal("90.00")
        assert dto.total_sale_amount == Decimal("90.00")

    async def test_unknown_id(self):
        handler = ShowSaleHandler(FakeSaleRepository())
        with pytest.raises(EntityNotFoundError, match="not found"):
            await handler.handle(GetSaleCommand(id=uuid.uuid4()))

    async def test_nil_id_rejected(self):
        handler = ShowSaleHandler(FakeSaleRepository())
        with pytest.raises(ValidationError):
            await handler.handle(GetSaleCommand(id=NIL_ID))


class TestListSales:

    async def test_twenty_five_sales_first_page(self):
        repo = FakeSaleRepository([stored_sale(n) for n in range(25)])
        page = await ListSalesHandler(repo).handle(ListSalesCommand(page=1, size=10))
        assert page.total_count == 25
        assert page.total_pages == 3
        assert len(page.items) == 10

    async def test_page_past_the_end_is_empty(self):
        repo = FakeSaleRepository([stored_sale(n) for n in range(25)])
        page = await ListSalesHandler(repo).handle(ListSalesCommand(page=4, size=10))
        assert page.items == []
        assert page.total_count == 25

    async def test_items_are_projected(self):
        repo = FakeSaleRepository([stored_sale(1, qty=10, price="1.00")])
        page = await ListSalesHandler(repo).handle(ListSalesCommand())
        assert page.items[0].total_sale_amount == Decimal("8.00")

    async def test_invalid_size_rejected(self):
        with pytest.raises(ValidationError):
            await ListSalesHandler(FakeSaleRepository()).handle(ListSalesCommand(size=0))
