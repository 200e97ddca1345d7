"""Application service: Show Tables use case (query)."""

from __future__ import annotations

from rms.application.dto import TablePoolDTO
from rms.domain.service.table_pool import TablePool


class ShowTablesHandler:

    def __init__(self, table_pool: TablePool) -> None:
        self._table_pool = table_pool

    def handle(self) -> TablePoolDTO:
        return TablePoolDTO.from_pool(self._table_pool)
