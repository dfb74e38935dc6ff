"""
Employee search endpoint for API v1.

All search terms are optional and combine with AND:

- **job_title** : case-insensitive substring of the job title.
- **name** : case-insensitive substring of the first or last name.
- **min_date**, **max_date** : inclusive bounds on the hire date,
  compared as given (e.g. ``2003-01-01``).

A term sent with an empty value (``?name=``) still counts as present.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from music_catalog_api.app.core.db import CatalogStore, get_store
from music_catalog_api.app.schemas.employee import EmployeeRead, EmployeeSearch
from music_catalog_api.app.services.employee_service import EmployeeService

router = APIRouter()


@router.get("", response_model=List[EmployeeRead])
async def search_employees(
    job_title: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    min_date: Optional[str] = Query(None),
    max_date: Optional[str] = Query(None),
    store: CatalogStore = Depends(get_store),
) -> List[EmployeeRead]:
    search = EmployeeSearch(
        job_title=job_title,
        name=name,
        min_date=min_date,
        max_date=max_date,
    )
    return await EmployeeService.search_employees(store, search)
