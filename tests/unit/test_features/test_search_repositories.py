"""Search repositories against SQLite: filters, both pagination modes, sort allow-lists."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from dmp_service.core.database import InvalidFilterError, NotFoundError
from dmp_service.core.pagination import InvalidCursorError, PaginationOptions
from dmp_service.features.affiliations import Affiliation, get_affiliation_repository
from dmp_service.features.licenses import License, get_license_repository
from dmp_service.features.metadata_standards import (
    MetadataStandard,
    get_metadata_standard_repository,
    metadata_standard_research_domains,
)
from dmp_service.features.projects import Project, get_project_repository
from dmp_service.features.repositories import Repository, get_repository_repository
from dmp_service.features.research_domains import ResearchDomain, get_research_domain_repository
from dmp_service.features.sections import Section, get_section_repository
from dmp_service.features.templates import Template
from dmp_service.features.users import User, get_user_repository

pytestmark = pytest.mark.integration


@pytest.fixture
async def licenses(session, make) -> list[License]:
    rows = []
    for uri, name, recommended in [
        ("https://spdx.org/licenses/CC-BY-4.0", "CC BY 4.0", True),
        ("https://spdx.org/licenses/CC0-1.0", "CC0 1.0", True),
        ("https://spdx.org/licenses/MIT", "MIT", False),
        ("https://spdx.org/licenses/Apache-2.0", "Apache 2.0", False),
        ("https://spdx.org/licenses/CC-BY-SA-4.0", "CC BY-SA 4.0", False),
    ]:
        rows.append(await make(session, License, uri=uri, name=name, recommended=recommended))
    return rows


class TestLicenseSearch:
    async def test_cursor_walk_visits_every_license_once(self, session, licenses):
        repo = get_license_repository()

        names, cursor = [], None
        while True:
            page = await repo.search(session, options=PaginationOptions(type="CURSOR", limit=2, cursor=cursor))
            assert len(page.items) <= 2
            assert page.total_count == 5
            names.extend(item.name for item in page.items)
            if not page.has_next_page:
                assert page.next_cursor is None
                break
            cursor = page.next_cursor

        assert names == sorted(lic.name for lic in licenses)

    async def test_term_filters_and_counts(self, session, licenses):
        page = await get_license_repository().search(
            session, term="cc", options=PaginationOptions(type="CURSOR", limit=2)
        )

        assert [item.name for item in page.items] == ["CC BY 4.0", "CC BY-SA 4.0"]
        assert page.total_count == 3
        assert page.has_next_page is True
        assert page.has_previous_page is False

    async def test_offset_sorting(self, session, licenses):
        page = await get_license_repository().search(
            session,
            options=PaginationOptions(offset=1, limit=3, sortField="recommended", sortDir="DESC"),
        )

        assert [item.recommended for item in page.items] == [True, False, False]
        assert page.current_offset == 1
        assert page.has_previous_page is True
        assert page.has_next_page is True
        assert page.available_sort_fields == ("name", "created", "recommended")

    async def test_no_matches(self, session, licenses):
        page = await get_license_repository().search(session, term="gpl")

        assert list(page.items) == []
        assert page.total_count == 0
        assert page.has_next_page is False
        assert page.has_previous_page is False

    async def test_cursor_does_not_survive_a_different_ordering(self, session, licenses):
        from dmp_service.core.pagination import CursorCodec, OrderingKey
        from dmp_service.core.settings import get_pagination_settings

        token = CursorCodec.from_settings(get_pagination_settings()).encode(
            OrderingKey("licenses/created:ASC,id:ASC", licenses[0].created_at, licenses[0].id)
        )

        with pytest.raises(InvalidCursorError):
            await get_license_repository().search(session, options=PaginationOptions(cursor=token))

    async def test_list_recommended(self, session, licenses):
        recommended = await get_license_repository().list_recommended(session)

        assert [lic.name for lic in recommended] == ["CC BY 4.0", "CC0 1.0"]


class TestBaseRepository:
    async def test_get_or_raise(self, session, licenses):
        repo = get_license_repository()

        assert (await repo.get_or_raise(session, licenses[0].id)).name == "CC BY 4.0"
        with pytest.raises(NotFoundError) as exc_info:
            await repo.get_or_raise(session, 999)
        assert exc_info.value.model_name == "License"

    async def test_get_many_skips_missing(self, session, licenses):
        found = await get_license_repository().get_many(session, [licenses[1].id, 999])

        assert [lic.id for lic in found] == [licenses[1].id]

    async def test_create_update_delete(self, session):
        repo = get_license_repository()
        created = await repo.create(session, License(uri="https://spdx.org/licenses/0BSD", name="0BSD"))

        created.description = "Zero-clause BSD"
        updated = await repo.update(session, created)
        assert updated.description == "Zero-clause BSD"
        assert updated.recommended is False

        await repo.delete(session, updated)
        assert await repo.get(session, created.id) is None


class TestAffiliationSearch:
    async def test_funder_and_active_filters(self, session, make):
        for uri, name, funder, active in [
            ("https://ror.org/a", "Alpha Foundation", True, True),
            ("https://ror.org/b", "Beta University", False, True),
            ("https://ror.org/c", "Gamma Fund", True, False),
        ]:
            await make(
                session, Affiliation, uri=uri, name=name, display_name=name.split()[0], funder=funder, active=active
            )
        repo = get_affiliation_repository()

        funders = await repo.search(session, funder_only=True)
        everyone = await repo.search(session, active=None)

        assert [a.name for a in funders.items] == ["Alpha Foundation"]
        assert [a.name for a in everyone.items] == ["Alpha Foundation", "Beta University", "Gamma Fund"]

    async def test_display_name_sort(self, session, make):
        await make(session, Affiliation, uri="https://ror.org/x", name="A", display_name="Zeta")
        await make(session, Affiliation, uri="https://ror.org/y", name="B", display_name="Eta")

        page = await get_affiliation_repository().search(
            session, options=PaginationOptions(offset=0, sortField="displayName")
        )

        assert [a.display_name for a in page.items] == ["Eta", "Zeta"]

    async def test_rejects_cursor_issued_by_another_search(self, session, make, licenses):
        await make(session, Affiliation, uri="https://ror.org/x", name="Alpha", display_name="Alpha")
        license_page = await get_license_repository().search(
            session, options=PaginationOptions(type="CURSOR", limit=2)
        )

        with pytest.raises(InvalidCursorError):
            await get_affiliation_repository().search(
                session, active=None, options=PaginationOptions(type="CURSOR", cursor=license_page.next_cursor)
            )


class TestUserSearch:
    async def test_default_order_is_surname(self, session, make, affiliation):
        for given, sur in [("Grace", "Hopper"), ("Alan", "Turing"), ("Ada", "Byron")]:
            await make(
                session,
                User,
                given_name=given,
                sur_name=sur,
                email=f"{given.lower()}@example.org",
                affiliation_id=affiliation.id,
            )

        page = await get_user_repository().search(session, affiliation_id=affiliation.id)

        assert [u.sur_name for u in page.items] == ["Byron", "Hopper", "Turing"]

    async def test_term_matches_email(self, session, make):
        await make(session, User, sur_name="Hopper", email="grace@navy.mil")
        await make(session, User, sur_name="Turing", email="alan@bletchley.uk")

        page = await get_user_repository().search(session, term="NAVY")

        assert [u.sur_name for u in page.items] == ["Hopper"]


class TestResearchDomainSearch:
    async def test_children_of_parent(self, session, make):
        parent = await make(session, ResearchDomain, uri="https://d/1", name="Life sciences")
        await make(session, ResearchDomain, uri="https://d/2", name="Zoology", parent_research_domain_id=parent.id)
        await make(session, ResearchDomain, uri="https://d/3", name="Botany", parent_research_domain_id=parent.id)
        await make(session, ResearchDomain, uri="https://d/4", name="Physics")

        page = await get_research_domain_repository().search(session, parent_id=parent.id)

        assert [d.name for d in page.items] == ["Botany", "Zoology"]
        assert page.total_count == 2


class TestSectionSearch:
    async def test_default_order_is_display_order(self, session, make, affiliation):
        template = await make(session, Template, name="NSF", owner_id=affiliation.uri)
        for order, name in [(3, "Data sharing"), (1, "Roles"), (2, "Data types")]:
            await make(session, Section, template_id=template.id, name=name, display_order=order)

        page = await get_section_repository().search(
            session, template_id=template.id, options=PaginationOptions(type="CURSOR", limit=2)
        )
        rest = await get_section_repository().search(
            session,
            template_id=template.id,
            options=PaginationOptions(type="CURSOR", limit=2, cursor=page.next_cursor),
        )

        assert [s.name for s in page.items] == ["Roles", "Data types"]
        assert [s.name for s in rest.items] == ["Data sharing"]


class TestRepositorySearch:
    async def test_type_and_keyword_filters(self, session, make):
        await make(
            session, Repository, uri="https://r/1", name="Zenodo", keywords="general,doi", repository_type="GENERALIST"
        )
        await make(
            session, Repository, uri="https://r/2", name="GenBank", keywords="genomics", repository_type="DISCIPLINARY"
        )
        repo = get_repository_repository()

        generalist = await repo.search(session, repository_type="GENERALIST")
        genomics = await repo.search(session, term="genom")

        assert [r.name for r in generalist.items] == ["Zenodo"]
        assert [r.name for r in genomics.items] == ["GenBank"]

    async def test_unknown_type_rejected(self, session):
        with pytest.raises(InvalidFilterError):
            await get_repository_repository().search(session, repository_type="BLOCKCHAIN")


class TestMetadataStandardSearch:
    async def test_research_domain_filter(self, session, make):
        domain = await make(session, ResearchDomain, uri="https://d/eco", name="Ecology")
        eml = await make(session, MetadataStandard, uri="https://m/eml", name="EML")
        await make(session, MetadataStandard, uri="https://m/dc", name="Dublin Core")
        await session.execute(
            metadata_standard_research_domains.insert().values(
                metadata_standard_id=eml.id, research_domain_id=domain.id
            )
        )

        page = await get_metadata_standard_repository().search(session, research_domain_id=domain.id)
        everything = await get_metadata_standard_repository().search(session)

        assert [m.name for m in page.items] == ["EML"]
        assert [m.name for m in everything.items] == ["Dublin Core", "EML"]


class TestProjectSearch:
    async def test_visible_to_creator_and_collaborators(self, session, make, user):
        other = await make(session, User, sur_name="Other", email="other@example.org")
        base = datetime(2025, 1, 1, tzinfo=UTC)
        mine = await make(session, Project, title="Mine", created_by_id=user.id, updated_at=base)
        shared = await make(
            session, Project, title="Shared", created_by_id=other.id, updated_at=base + timedelta(days=2)
        )
        await make(session, Project, title="Hidden", created_by_id=other.id, updated_at=base + timedelta(days=1))
        await get_project_repository().add_collaborator(session, shared.id, user.id)

        page = await get_project_repository().search(session, user_id=user.id)

        assert [p.title for p in page.items] == ["Shared", "Mine"]
        assert page.total_count == 2
        assert mine.id in {p.id for p in page.items}

    async def test_cursor_walk_on_modified_desc(self, session, make, user):
        base = datetime(2025, 1, 1, tzinfo=UTC)
        for i, days in enumerate([3, 1, 3, 2, 5]):
            await make(
                session,
                Project,
                title=f"P{i}",
                created_by_id=user.id,
                updated_at=base + timedelta(days=days),
            )
        repo = get_project_repository()

        titles, cursor = [], None
        while True:
            page = await repo.search(
                session, user_id=user.id, options=PaginationOptions(type="CURSOR", limit=2, cursor=cursor)
            )
            titles.extend(p.title for p in page.items)
            if not page.has_next_page:
                break
            cursor = page.next_cursor

        assert titles == ["P4", "P0", "P2", "P3", "P1"]
