"""Application service: Show Sale use case (query)."""

from __future__ import annotations

import logging

from soms.application.dto import GetSaleCommand, SaleDTO
from soms.application.mapping import to_sale_dto
from soms.application.validation import ensure_valid, validate_identifier
from soms.domain.exceptions import EntityNotFoundError
from soms.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class ShowSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    async def handle(self, command: GetSaleCommand) -> SaleDTO:
        ensure_valid(validate_identifier(command.id))

        sale = await self._sale_repo.get_by_id(command.id)
        if sale is None:
            raise EntityNotFoundError(f"Sale with ID {command.id} not found")

        logger.debug("Loaded sale %s", sale.id)
        return to_sale_dto(sale)
