"""Tests for the employee search endpoint."""


def _ids(response):
    assert response.status_code == 200
    return [row["EmployeeId"] for row in response.json()]


def test_no_terms_returns_everyone(client):
    assert _ids(client.get("/employees")) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_row_shape(client):
    row = client.get("/employees", params={"name": "Adams"}).json()[0]
    assert row["LastName"] == "Adams"
    assert row["FirstName"] == "Andrew"
    assert row["Title"] == "General Manager"
    assert row["HireDate"] == "2002-08-14 00:00:00"
    assert row["ReportsTo"] is None


def test_job_title_is_case_insensitive_substring(client):
    assert _ids(client.get("/employees", params={"job_title": "sales"})) == [2, 3, 4, 5]


def test_name_matches_first_or_last(client):
    assert _ids(client.get("/employees", params={"name": "park"})) == [4]
    assert _ids(client.get("/employees", params={"name": "Robert"})) == [7]


def test_hire_date_range_is_inclusive(client):
    params = {"min_date": "2003-05-03 00:00:00", "max_date": "2003-10-17 00:00:00"}
    assert _ids(client.get("/employees", params=params)) == [4, 5, 6]


def test_terms_combine_with_and(client):
    assert _ids(client.get("/employees", params={"job_title": "IT", "name": "king"})) == [7]


def test_parameter_order_does_not_matter(client):
    first = client.get("/employees?job_title=Sales&name=a")
    second = client.get("/employees?name=a&job_title=Sales")
    assert first.json() == second.json()
    assert _ids(first) == [2, 3, 4]


def test_empty_term_counts_as_present(client):
    assert _ids(client.get("/employees?name=")) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_wildcards_match_literally(client):
    assert _ids(client.get("/employees", params={"name": "%"})) == []


def test_malformed_date_is_passed_to_the_store(client):
    assert _ids(client.get("/employees", params={"min_date": "not-a-date"})) == []


def test_plain_date_bounds_include_that_day(client):
    params = {"min_date": "2003-10-17", "max_date": "2003-10-17"}
    assert _ids(client.get("/employees", params=params)) == [5, 6]
    assert _ids(client.get("/employees", params={"max_date": "2002-04-01"})) == [3]
    assert _ids(client.get("/employees", params={"min_date": "2004-01-02"})) == [7, 8]
