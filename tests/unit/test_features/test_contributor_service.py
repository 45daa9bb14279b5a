"""Contributor create/update with best-effort role assignment."""

from __future__ import annotations

import pytest

from dmp_service.core.database import NotFoundError
from dmp_service.features.contributors import (
    ContributorCreate,
    ContributorRole,
    ContributorRoleRepository,
    ContributorService,
    ContributorUpdate,
)
from dmp_service.features.contributors.service import ROLES_FIELD

pytestmark = pytest.mark.integration


@pytest.fixture
async def roles(session, make) -> list[ContributorRole]:
    rows = []
    for order, (slug, label) in enumerate(
        [("curation", "Data curation"), ("software", "Software"), ("funding", "Funding acquisition")], start=1
    ):
        rows.append(
            await make(
                session, ContributorRole, uri=f"https://credit.niso.org/{slug}", label=label, display_order=order
            )
        )
    return rows


class StuckRoleRepository(ContributorRoleRepository):
    """Role repository whose unlinks never take effect."""

    async def remove_from_contributor(self, session, role_id, contributor_id):
        return False


class TestCreateContributor:
    async def test_assigns_all_roles(self, session, project, roles):
        service = ContributorService(session)

        result = await service.create_contributor(
            ContributorCreate(
                projectId=project.id,
                givenName="Rosalind",
                surName="Franklin",
                email="rf@example.org",
                contributorRoleIds=[roles[0].id, roles[1].id],
            )
        )

        assert result.entity.id is not None
        assert result.entity.sur_name == "Franklin"
        assert result.errors == {}
        assert (await service.role_association(result.entity.id)).association_ids == (
            roles[0].id,
            roles[1].id,
        )

    async def test_missing_role_is_a_warning_not_a_failure(self, session, project, roles):
        service = ContributorService(session)

        result = await service.create_contributor(
            ContributorCreate(project_id=project.id, sur_name="Franklin", contributor_role_ids=[roles[0].id, 999])
        )

        assert result.errors == {ROLES_FIELD: "Created but unable to assign roles: 999"}
        assert result.outcomes[ROLES_FIELD].failed_additions[0].reason == "not found"
        assert await service.get_contributor(result.entity.id) is result.entity
        assert (await service.role_association(result.entity.id)).association_ids == (roles[0].id,)

    async def test_no_roles_requested(self, session, project):
        result = await ContributorService(session).create_contributor(
            ContributorCreate(project_id=project.id, sur_name="Curie")
        )

        assert result.has_warnings is False
        assert result.outcomes[ROLES_FIELD].delta.is_empty


class TestUpdateContributor:
    async def test_replaces_role_set(self, session, project, roles):
        service = ContributorService(session)
        created = await service.create_contributor(
            ContributorCreate(
                project_id=project.id, sur_name="Franklin", contributor_role_ids=[roles[0].id, roles[1].id]
            )
        )

        result = await service.update_contributor(
            created.entity.id,
            ContributorUpdate(contributor_role_ids=[roles[1].id, roles[2].id]),
        )

        outcome = result.outcomes[ROLES_FIELD]
        assert outcome.applied_removals == (roles[0].id,)
        assert outcome.applied_additions == (roles[2].id,)
        assert result.errors == {}
        assert (await service.role_association(created.entity.id)).association_ids == (
            roles[1].id,
            roles[2].id,
        )

    async def test_none_leaves_roles_untouched(self, session, project, roles):
        service = ContributorService(session)
        created = await service.create_contributor(
            ContributorCreate(project_id=project.id, sur_name="Franklin", contributor_role_ids=[roles[0].id])
        )

        result = await service.update_contributor(created.entity.id, ContributorUpdate(orcid="0000-0002-1825-0097"))

        assert result.entity.orcid == "0000-0002-1825-0097"
        assert result.entity.sur_name == "Franklin"
        assert ROLES_FIELD not in result.outcomes
        assert (await service.role_association(created.entity.id)).association_ids == (roles[0].id,)

    async def test_failed_removal_uses_role_label(self, session, project, roles):
        service = ContributorService(session, roles=StuckRoleRepository())
        created = await service.create_contributor(
            ContributorCreate(project_id=project.id, sur_name="Franklin", contributor_role_ids=[roles[0].id])
        )

        result = await service.update_contributor(
            created.entity.id,
            ContributorUpdate(contributor_role_ids=[roles[1].id, 999]),
        )

        assert result.errors[ROLES_FIELD] == (
            "Updated but unable to remove roles: Data curation, unable to assign roles: 999"
        )
        assert (await service.role_association(created.entity.id)).association_ids == (
            roles[0].id,
            roles[1].id,
        )

    async def test_unknown_contributor(self, session):
        with pytest.raises(NotFoundError):
            await ContributorService(session).update_contributor(4242, ContributorUpdate(sur_name="Nobody"))
