"""Tests for the pagination query dependency, response shape and problem handlers."""

from __future__ import annotations

import pytest
from tests.helpers import InMemoryPageFetcher, Row
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from dmp_service.app import register_exception_handlers
from dmp_service.core.database import InvalidFilterError, NotFoundError, RepositoryError
from dmp_service.core.dependencies import PaginationQuery
from dmp_service.core.pagination import (
    PaginatedQuery,
    PaginatedResponse,
    PaginationEngine,
    SortColumn,
)
from dmp_service.core.settings import PaginationSettings
from dmp_service.infra.logging import set_log_context

ROWS = [Row(id=1, name="A"), Row(id=2, name="B"), Row(id=3, name="C")]


class RowRead(BaseModel):
    id: int
    name: str


def create_test_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    settings = PaginationSettings(default_limit=2, max_limit=5, cursor_secret="api-secret")

    @app.get("/rows")
    async def search_rows(options: PaginationQuery):
        query = PaginatedQuery(
            statement=ROWS,
            default_sort=SortColumn("name", "name"),
            tie_break=SortColumn("id", "id"),
            sort_fields=(SortColumn("name", "name"),),
        )
        page = await PaginationEngine(InMemoryPageFetcher(), settings=settings).paginate(query, options)
        response = PaginatedResponse[RowRead].from_result(
            page, lambda row: RowRead(id=row.id, name=row.name)
        )
        return response.model_dump(by_alias=True, exclude_none=True)

    @app.get("/options")
    async def echo_options(options: PaginationQuery):
        return options.model_dump(by_alias=True)

    @app.get("/templates/{template_id}")
    async def get_template(template_id: int):
        set_log_context(request_id="req-123")
        raise NotFoundError("Template", {"id": template_id})

    @app.get("/broken")
    async def broken():
        raise RepositoryError("connection pool exhausted")

    @app.get("/repositories")
    async def search_repositories(kind: str):
        raise InvalidFilterError(f"Unknown repository type {kind!r}", filter_name="repositoryType")

    @app.get("/typed")
    async def typed(count: int):
        return {"count": count}

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_test_app())


class TestPaginationQueryDependency:
    def test_parses_external_input_shape(self, client):
        response = client.get(
            "/options",
            params=[
                ("type", "OFFSET"),
                ("limit", "10"),
                ("offset", "20"),
                ("sortField", "created"),
                ("sortDir", "DESC"),
                ("bestPractice", "true"),
                ("selectOwnerURIs", "https://ror.org/1"),
                ("selectOwnerURIs", "https://ror.org/2"),
            ],
        )

        assert response.status_code == 200
        assert response.json() == {
            "type": "OFFSET",
            "cursor": None,
            "limit": 10,
            "offset": 20,
            "sortField": "created",
            "sortDir": "DESC",
            "bestPractice": True,
            "selectOwnerURIs": ["https://ror.org/1", "https://ror.org/2"],
        }

    def test_all_parameters_optional(self, client):
        response = client.get("/options")

        assert response.status_code == 200
        assert set(response.json().values()) == {None}


class TestPaginatedResponse:
    def test_cursor_walk_over_http(self, client):
        first = client.get("/rows", params={"type": "CURSOR", "limit": 2}).json()

        assert [item["name"] for item in first["items"]] == ["A", "B"]
        assert first["totalCount"] == 3
        assert first["hasNextPage"] is True
        assert "currentOffset" not in first

        second = client.get("/rows", params={"cursor": first["nextCursor"], "limit": 2}).json()

        assert [item["name"] for item in second["items"]] == ["C"]
        assert second["hasNextPage"] is False
        assert second["hasPreviousPage"] is True
        assert "nextCursor" not in second

    def test_offset_page_reports_sort_fields(self, client):
        body = client.get("/rows", params={"offset": 2}).json()

        assert body["currentOffset"] == 2
        assert body["availableSortFields"] == ["name"]
        assert body["limit"] == 2


class TestProblemHandlers:
    def test_invalid_limit_is_400_problem(self, client):
        response = client.get("/rows", params={"limit": 0})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        body = response.json()
        assert body["type"] == "invalid-pagination-options"
        assert body["title"] == "Bad Request"
        assert body["limit"] == 0

    def test_invalid_cursor_is_400_problem(self, client):
        response = client.get("/rows", params={"cursor": "forged.token"})

        assert response.status_code == 400
        assert response.json()["type"] == "invalid-cursor"

    def test_not_found_is_404(self, client):
        response = client.get("/templates/42")

        assert response.status_code == 404
        body = response.json()
        assert body["type"] == "not-found"
        assert body["entity"] == "Template"
        assert "42" in body["detail"]
        assert body["request_id"] == "req-123"

    def test_other_repository_errors_are_500_without_details(self, client):
        response = client.get("/broken")

        assert response.status_code == 500
        body = response.json()
        assert body["type"] == "internal-error"
        assert "pool" not in body["detail"]

    def test_invalid_filter_is_400(self, client):
        response = client.get("/repositories", params={"kind": "BLOCKCHAIN"})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        body = response.json()
        assert body["type"] == "invalid-filter"
        assert "BLOCKCHAIN" in body["detail"]
        assert body["filter"] == "repositoryType"

    def test_validation_errors_list_fields(self, client):
        response = client.get("/typed", params={"count": "many"})

        assert response.status_code == 422
        body = response.json()
        assert body["type"] == "validation-error"
        assert body["errors"][0]["field"] == "query.count"
