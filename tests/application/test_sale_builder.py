"""Tests for the Sale aggregate builder."""

from decimal import Decimal

import pytest

from soms.application import sale_builder
from soms.domain.exceptions import ValidationError
from soms.domain.model.value_objects import Money
from tests.application.helpers import GADGET, create_command, item_spec


class TestBuild:

    def test_single_top_tier_item(self):
        sale = sale_builder.build(create_command(item_spec(10, "100.00")))
        item = sale.items[0]
        assert item.discount == Decimal("0.20")
        assert item.total_amount == Money.of("800.00")
        assert sale.total_sale_amount == Money.of("800.00")

    def test_mixed_tiers(self):
        sale = sale_builder.build(
            create_command(item_spec(3, "50"), item_spec(5, "20", product=GADGET))
        )
        assert [i.discount for i in sale.items] == [Decimal("0"), Decimal("0.10")]
        assert [i.total_amount for i in sale.items] == [Money.of("150.00"), Money.of("90.00")]
        assert sale.total_sale_amount == Money.of("240.00")

    def test_fresh_identifiers(self):
        first = sale_builder.build(create_command(item_spec(), item_spec()))
        second = sale_builder.build(create_command(item_spec()))
        ids = {first.id, second.id, *(i.id for i in first.items), *(i.id for i in second.items)}
        assert len(ids) == 5

    def test_keeps_every_item_in_order(self):
        specs = [item_spec(q, "1.00") for q in range(1, 8)]
        sale = sale_builder.build(create_command(*specs))
        assert [i.quantity.value for i in sale.items] == list(range(1, 8))

    def test_items_start_active(self):
        sale = sale_builder.build(create_command(item_spec()))
        assert sale.items[0].cancelled is False

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            sale_builder.build(create_command(items=[]))
        assert "items" in excinfo.value.fields()
