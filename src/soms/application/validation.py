"""Field-level command validation.

Each ``validate_*`` function returns the full list of violations found in
a command; ``ensure_valid`` turns a non-empty list into a single
ValidationError.  Nothing here stops at the first problem.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from soms.application.dto import (
    CartItemSpec,
    CreateCartCommand,
    CreateSaleCommand,
    SaleItemSpec,
    UpdateCartCommand,
    UpdateSaleCommand,
)
from soms.domain.exceptions import FieldViolation, ValidationError

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_ITEM_QUANTITY = 20

SALE_NUMBER_LENGTH = (3, 50)
CUSTOMER_LENGTH_ON_CREATE = (2, 100)
CUSTOMER_LENGTH_ON_UPDATE = (3, 100)
BRANCH_LENGTH = (2, 50)

NIL_ID = uuid.UUID(int=0)


def ensure_valid(violations: list[FieldViolation]) -> None:
    if violations:
        raise ValidationError.from_violations(violations)


# --- Field helpers ------------------------------------------------------------


def is_nil_id(value: object) -> bool:
    return not isinstance(value, uuid.UUID) or value == NIL_ID


def is_zero_date(value: object) -> bool:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) == datetime.min
    if isinstance(value, date):
        return value == date.min
    return True


def _check_required_text(
    violations: list[FieldViolation], name: str, value: object
) -> bool:
    if not isinstance(value, str) or not value.strip():
        violations.append(FieldViolation(name, f"{name} is required"))
        return False
    return True


def _check_length(
    violations: list[FieldViolation],
    name: str,
    value: str,
    bounds: tuple[int, int],
) -> None:
    low, high = bounds
    if not low <= len(value.strip()) <= high:
        violations.append(
            FieldViolation(name, f"{name} must be between {low} and {high} characters")
        )


def _check_id(violations: list[FieldViolation], name: str, value: object) -> None:
    if is_nil_id(value):
        violations.append(FieldViolation(name, f"{name} is required"))


def _check_date(violations: list[FieldViolation], name: str, value: object) -> None:
    if is_zero_date(value):
        violations.append(FieldViolation(name, f"{name} must be a valid date"))


def _check_quantity(
    violations: list[FieldViolation],
    path: str,
    quantity: object,
    maximum: int | None,
) -> None:
    name = f"{path}.quantity"
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        violations.append(FieldViolation(name, "Quantity must be an integer"))
    elif quantity <= 0:
        violations.append(FieldViolation(name, "Quantity must be greater than 0"))
    elif maximum is not None and quantity > maximum:
        violations.append(
            FieldViolation(
                name, f"Cannot sell more than {maximum} identical items"
            )
        )


# --- Sale items ---------------------------------------------------------------


def validate_sale_items(items: object) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    if not isinstance(items, list) or not items:
        violations.append(FieldViolation("items", "Sale must contain at least one item"))
        return violations

    for index, item in enumerate(items):
        path = f"items[{index}]"
        if not isinstance(item, SaleItemSpec):
            violations.append(FieldViolation(path, "Malformed sale item"))
            continue
        _check_id(violations, f"{path}.product_id", item.product_id)
        _check_quantity(violations, path, item.quantity, MAX_ITEM_QUANTITY)
        price = item.unit_price
        if isinstance(price, bool) or not isinstance(price, (Decimal, int)):
            violations.append(
                FieldViolation(f"{path}.unit_price", "UnitPrice must be a decimal amount")
            )
        elif isinstance(price, Decimal) and not price.is_finite():
            violations.append(
                FieldViolation(f"{path}.unit_price", "UnitPrice must be a finite amount")
            )
        elif not price > 0:
            violations.append(
                FieldViolation(f"{path}.unit_price", "UnitPrice must be greater than 0")
            )
    return violations


# --- Sale commands ------------------------------------------------------------


def validate_create_sale(command: CreateSaleCommand) -> list[FieldViolation]:
    violations: list[FieldViolation] = []

    if _check_required_text(violations, "sale_number", command.sale_number):
        _check_length(violations, "sale_number", command.sale_number, SALE_NUMBER_LENGTH)
    _check_date(violations, "sale_date", command.sale_date)
    if _check_required_text(violations, "customer", command.customer):
        _check_length(violations, "customer", command.customer, CUSTOMER_LENGTH_ON_CREATE)
    if _check_required_text(violations, "branch", command.branch):
        _check_length(violations, "branch", command.branch, BRANCH_LENGTH)

    violations.extend(validate_sale_items(command.items))
    return violations


def validate_update_sale(command: UpdateSaleCommand) -> list[FieldViolation]:
    """Only fields that are present are checked."""
    violations: list[FieldViolation] = []

    _check_id(violations, "id", command.id)
    if command.sale_number is not None:
        _check_length(violations, "sale_number", command.sale_number, SALE_NUMBER_LENGTH)
    if command.sale_date is not None:
        _check_date(violations, "sale_date", command.sale_date)
    if command.customer is not None:
        _check_length(violations, "customer", command.customer, CUSTOMER_LENGTH_ON_UPDATE)
    if command.branch is not None:
        _check_length(violations, "branch", command.branch, BRANCH_LENGTH)
    if command.items is not None:
        violations.extend(validate_sale_items(command.items))
    return violations


# --- Cart commands ------------------------------------------------------------


def validate_cart_items(items: object) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    if not isinstance(items, list):
        violations.append(FieldViolation("items", "Items must be a list"))
        return violations

    for index, item in enumerate(items):
        path = f"items[{index}]"
        if not isinstance(item, CartItemSpec):
            violations.append(FieldViolation(path, "Malformed cart item"))
            continue
        _check_id(violations, f"{path}.product_id", item.product_id)
        _check_quantity(violations, path, item.quantity, maximum=None)
    return violations


def validate_create_cart(command: CreateCartCommand) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    _check_id(violations, "user_id", command.user_id)
    _check_date(violations, "date", command.date)
    violations.extend(validate_cart_items(command.items))
    return violations


def validate_update_cart(command: UpdateCartCommand) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    _check_id(violations, "id", command.id)
    if command.user_id is not None:
        _check_id(violations, "user_id", command.user_id)
    if command.date is not None:
        _check_date(violations, "date", command.date)
    if command.items is not None:
        violations.extend(validate_cart_items(command.items))
    return violations


# --- Shared -------------------------------------------------------------------


def validate_identifier(value: object, name: str = "id") -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    _check_id(violations, name, value)
    return violations


def validate_page_request(page: object, size: object) -> list[FieldViolation]:
    violations: list[FieldViolation] = []
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        violations.append(FieldViolation("page", "Page must be greater than or equal to 1"))
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        violations.append(FieldViolation("size", "Size must be greater than or equal to 1"))
    return violations
