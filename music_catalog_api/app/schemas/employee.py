"""
Pydantic models for employees.

Employees are read-only here.  ``EmployeeSearch`` holds the optional
search terms taken from the query string; a term set to ``None`` is
absent, any string (including the empty string) is present.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EmployeeSearch(BaseModel):
    job_title: Optional[str] = None
    name: Optional[str] = None
    min_date: Optional[str] = None
    max_date: Optional[str] = None


class EmployeeRead(BaseModel):
    employee_id: int = Field(..., alias="EmployeeId")
    last_name: str = Field(..., alias="LastName")
    first_name: str = Field(..., alias="FirstName")
    title: Optional[str] = Field(None, alias="Title")
    reports_to: Optional[int] = Field(None, alias="ReportsTo")
    birth_date: Optional[str] = Field(None, alias="BirthDate")
    hire_date: Optional[str] = Field(None, alias="HireDate")
    address: Optional[str] = Field(None, alias="Address")
    city: Optional[str] = Field(None, alias="City")
    state: Optional[str] = Field(None, alias="State")
    country: Optional[str] = Field(None, alias="Country")
    postal_code: Optional[str] = Field(None, alias="PostalCode")
    phone: Optional[str] = Field(None, alias="Phone")
    fax: Optional[str] = Field(None, alias="Fax")
    email: Optional[str] = Field(None, alias="Email")

    model_config = {"populate_by_name": True}
