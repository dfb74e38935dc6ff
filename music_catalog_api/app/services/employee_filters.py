"""
Composition of the employee search predicate.

``build_employee_filter`` turns the optional search terms into a
``WHERE`` clause and its bound parameters.  Each present term adds one
predicate joined with ``AND`` to an always-true base predicate, so
the terms commute.  A term is present when it is not ``None``; the
empty string is a present term and, for substring searches, matches
every non-null value.

Hire-date bounds are compared as dates through SQLite's ``julianday``,
so ``2003-10-17`` and ``2003-10-17 00:00:00`` are the same instant.
A value SQLite cannot read as a date yields ``NULL`` and matches no row.
"""

from typing import Any, List, Optional, Tuple

from music_catalog_api.app.schemas.employee import EmployeeSearch

Predicate = Tuple[str, List[Any]]

LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """Build a ``LIKE`` pattern matching ``term`` literally anywhere."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def job_title_predicate(job_title: str) -> Predicate:
    return "Title LIKE ? ESCAPE '\\'", [contains_pattern(job_title)]


def name_predicate(name: str) -> Predicate:
    pattern = contains_pattern(name)
    return "(FirstName LIKE ? ESCAPE '\\' OR LastName LIKE ? ESCAPE '\\')", [pattern, pattern]


def min_hire_date_predicate(min_date: str) -> Predicate:
    return "julianday(HireDate) >= julianday(?)", [min_date]


def max_hire_date_predicate(max_date: str) -> Predicate:
    return "julianday(HireDate) <= julianday(?)", [max_date]


def collect_predicates(search: EmployeeSearch) -> List[Predicate]:
    """Return one predicate per present term."""
    predicates: List[Predicate] = []
    if search.job_title is not None:
        predicates.append(job_title_predicate(search.job_title))
    if search.name is not None:
        predicates.append(name_predicate(search.name))
    if search.min_date is not None:
        predicates.append(min_hire_date_predicate(search.min_date))
    if search.max_date is not None:
        predicates.append(max_hire_date_predicate(search.max_date))
    return predicates


def build_employee_filter(search: Optional[EmployeeSearch] = None) -> Predicate:
    """Return ``(where_clause, params)`` for ``search``.

    Date bounds are handed to the store as given; they are not parsed
    or validated here.
    """
    clauses = ["1 = 1"]
    params: List[Any] = []
    for clause, values in collect_predicates(search or EmployeeSearch()):
        clauses.append(clause)
        params.extend(values)
    return " AND ".join(clauses), params
