"""Application service: List Sales use case (query)."""

from __future__ import annotations

import logging

from soms.application.dto import ListSalesCommand, SaleDTO
from soms.application.mapping import to_sale_dto
from soms.application.pagination import Page, paginate
from soms.application.validation import ensure_valid, validate_page_request
from soms.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class ListSalesHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    async def handle(self, command: ListSalesCommand) -> Page[SaleDTO]:
        ensure_valid(validate_page_request(command.page, command.size))

        sales = await self._sale_repo.list_all()
        page = paginate(sales, command.page, command.size)

        logger.debug(
            "Listed sales page %d/%d (%d total)",
            page.current_page, page.total_pages, page.total_count,
        )
        return page.map(to_sale_dto)
