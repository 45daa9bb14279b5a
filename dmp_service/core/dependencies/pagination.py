"""FastAPI dependency parsing search pagination query parameters.

Values are passed through unvalidated; ``PaginationEngine`` checks them so
every search rejects bad input with the same ``invalid-pagination-options``
problem.

Usage:
    from dmp_service.core.dependencies.pagination import PaginationQuery

    @router.get("/licenses")
    async def search_licenses(options: PaginationQuery, term: str | None = None):
        page = await license_repo.search(session, term=term, options=options)
        return PaginatedResponse.from_result(page, LicenseRead.model_validate)
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query

from dmp_service.core.pagination import PaginationOptions


def get_pagination_options(
    cursor: Annotated[
        str | None,
        Query(description="Continuation token from a previous CURSOR page"),
    ] = None,
    limit: Annotated[
        int | None,
        Query(description="Page size (defaults and maximum from settings)"),
    ] = None,
    offset: Annotated[
        int | None,
        Query(description="Rows to skip (OFFSET mode)"),
    ] = None,
    sort_field: Annotated[
        str | None,
        Query(alias="sortField", description="Sort field (OFFSET mode)"),
    ] = None,
    sort_dir: Annotated[
        str | None,
        Query(alias="sortDir", description="ASC or DESC (OFFSET mode)"),
    ] = None,
    type_: Annotated[
        str | None,
        Query(alias="type", description="CURSOR or OFFSET"),
    ] = None,
    best_practice: Annotated[
        bool | None,
        Query(alias="bestPractice", description="Only best-practice templates"),
    ] = None,
    select_owner_uris: Annotated[
        list[str] | None,
        Query(alias="selectOwnerURIs", description="Only templates owned by these affiliations"),
    ] = None,
) -> PaginationOptions:
    """Collect the pagination input shape from query parameters."""
    return PaginationOptions(
        type=type_,
        cursor=cursor,
        limit=limit,
        offset=offset,
        sort_field=sort_field,
        sort_dir=sort_dir,
        best_practice=best_practice,
        select_owner_uris=select_owner_uris,
    )


PaginationQuery = Annotated[PaginationOptions, Depends(get_pagination_options)]


__all__ = ["PaginationQuery", "get_pagination_options"]
