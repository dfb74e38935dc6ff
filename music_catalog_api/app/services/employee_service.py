"""
Read-only access to employees.

``EmployeeService.search_employees`` runs the single filtered read
composed by ``employee_filters``.  Rows are ordered by ``EmployeeId``
so that the output does not depend on which terms were supplied first.
"""

import logging
from typing import List, Optional

from music_catalog_api.app.core.db import CatalogStore
from music_catalog_api.app.schemas.employee import EmployeeRead, EmployeeSearch
from music_catalog_api.app.services.employee_filters import build_employee_filter


class EmployeeService:
    """Сервис поиска сотрудников."""

    @classmethod
    async def search_employees(
        cls,
        store: CatalogStore,
        search: Optional[EmployeeSearch] = None,
    ) -> List[EmployeeRead]:
        logger = logging.getLogger(__name__)
        where, params = build_employee_filter(search)
        rows = store.fetch_all(
            f"SELECT * FROM Employee WHERE {where} ORDER BY EmployeeId",
            params,
        )
        logger.debug("Employee search matched %d rows", len(rows))
        return [EmployeeRead(**row) for row in rows]
