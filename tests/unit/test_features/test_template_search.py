"""Template searches: owner and best-practice filters plus facets."""

from __future__ import annotations

import pytest

from dmp_service.core.pagination import PaginationOptions
from dmp_service.features.templates import (
    Template,
    TemplateSearchResponse,
    TemplateVersionType,
    VersionedTemplate,
    get_template_repository,
    get_versioned_template_repository,
)

pytestmark = pytest.mark.integration

UCSD = "https://ror.org/0168r3w48"
NSF = "https://ror.org/021nxhr62"
DCC = "https://ror.org/03kk9k137"


@pytest.fixture
async def templates(session, make) -> list[Template]:
    rows = []
    for name, owner, best_practice in [
        ("NSF Data Management", NSF, True),
        ("UCSD Data Plan", UCSD, False),
        ("DCC Checklist", DCC, True),
        ("UCSD Archive Plan", UCSD, False),
        ("Soil survey", NSF, False),
    ]:
        rows.append(
            await make(
                session,
                Template,
                name=name,
                description=f"{name} template",
                owner_id=owner,
                best_practice=best_practice,
            )
        )
    return rows


class TestTemplateSearch:
    async def test_facets_cover_every_term_match(self, session, templates):
        page = await get_template_repository().search(
            session, term="plan", options=PaginationOptions(limit=1)
        )

        assert [t.name for t in page.items] == ["UCSD Archive Plan"]
        assert page.total_count == 2
        assert page.available_affiliations == (UCSD,)
        assert page.has_best_practice_templates is False

    async def test_best_practice_filter(self, session, templates):
        page = await get_template_repository().search(
            session, options=PaginationOptions(bestPractice=True)
        )

        assert [t.name for t in page.items] == ["DCC Checklist", "NSF Data Management"]
        assert page.has_best_practice_templates is True
        assert set(page.available_affiliations) == {UCSD, NSF, DCC}

    async def test_best_practice_false_means_no_filter(self, session, templates):
        page = await get_template_repository().search(
            session, options=PaginationOptions(bestPractice=False, limit=10)
        )

        assert page.total_count == 5

    async def test_owner_filter_keeps_full_facets(self, session, templates):
        page = await get_template_repository().search(
            session, options=PaginationOptions(selectOwnerURIs=[NSF], limit=10)
        )

        assert [t.name for t in page.items] == ["NSF Data Management", "Soil survey"]
        assert page.available_affiliations == tuple(sorted({UCSD, NSF, DCC}))

    async def test_empty_owner_list_is_no_filter(self, session, templates):
        page = await get_template_repository().search(
            session, options=PaginationOptions(selectOwnerURIs=[], limit=10)
        )

        assert page.total_count == 5

    async def test_cursor_pages_keep_filters(self, session, templates):
        repo = get_template_repository()
        options = {"type": "CURSOR", "limit": 1, "selectOwnerURIs": [UCSD]}

        first = await repo.search(session, options=PaginationOptions(**options))
        second = await repo.search(
            session, options=PaginationOptions(**options, cursor=first.next_cursor)
        )

        assert [t.name for t in first.items] == ["UCSD Archive Plan"]
        assert [t.name for t in second.items] == ["UCSD Data Plan"]
        assert second.has_next_page is False
        assert second.has_previous_page is True

    async def test_offset_sort_by_modified(self, session, templates):
        page = await get_template_repository().search(
            session, options=PaginationOptions(offset=0, limit=10, sortField="modified", sortDir="DESC")
        )

        assert len(page.items) == 5
        assert "modified" in page.available_sort_fields

    async def test_response_shape(self, session, templates):
        page = await get_template_repository().search(session, term="ucsd")

        body = TemplateSearchResponse.from_template_result(page, lambda t: t.name).model_dump(
            by_alias=True, exclude_none=True
        )

        assert body["items"] == ["UCSD Archive Plan", "UCSD Data Plan"]
        assert body["availableAffiliations"] == [UCSD]
        assert body["hasBestPracticeTemplates"] is False
        assert body["totalCount"] == 2


class TestPublishedTemplateSearch:
    async def test_only_active_published_versions(self, session, make, templates):
        nsf, ucsd = templates[0], templates[1]
        for template, version, version_type, active in [
            (nsf, "v1", TemplateVersionType.PUBLISHED, False),
            (nsf, "v2", TemplateVersionType.PUBLISHED, True),
            (nsf, "v3", TemplateVersionType.DRAFT, False),
            (ucsd, "v1", TemplateVersionType.PUBLISHED, True),
        ]:
            await make(
                session,
                VersionedTemplate,
                template_id=template.id,
                version=version,
                version_type=version_type,
                name=template.name,
                owner_id=template.owner_id,
                best_practice=template.best_practice,
                active=active,
            )

        page = await get_versioned_template_repository().search_published(session)

        assert [(v.name, v.version) for v in page.items] == [
            ("NSF Data Management", "v2"),
            ("UCSD Data Plan", "v1"),
        ]
        assert page.has_best_practice_templates is True
        assert page.available_affiliations == tuple(sorted({NSF, UCSD}))
