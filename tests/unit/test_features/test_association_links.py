"""Link-table operations against SQLite, including SAVEPOINT isolation."""

from __future__ import annotations

import pytest

from dmp_service.core.associations import AssociationError
from dmp_service.features.outputs import ResearchOutput
from dmp_service.features.repositories import OUTPUT_REPOSITORIES, Repository, get_repository_repository

pytestmark = pytest.mark.integration


@pytest.fixture
async def output(session, make, project) -> ResearchOutput:
    return await make(session, ResearchOutput, project_id=project.id, title="Reef images")


@pytest.fixture
async def zenodo(session, make) -> Repository:
    return await make(session, Repository, uri="https://www.re3data.org/r3d100010468", name="Zenodo")


class TestAssociationLink:
    async def test_add_remove_and_current_ids(self, session, output, zenodo):
        assert await OUTPUT_REPOSITORIES.add(session, output.id, zenodo.id) is True
        assert await OUTPUT_REPOSITORIES.current_ids(session, output.id) == [zenodo.id]

        assert await OUTPUT_REPOSITORIES.remove(session, output.id, zenodo.id) is True
        assert await OUTPUT_REPOSITORIES.current_ids(session, output.id) == []

    async def test_duplicate_add_returns_false_and_keeps_session_usable(self, session, output, zenodo):
        await OUTPUT_REPOSITORIES.add(session, output.id, zenodo.id)

        assert await OUTPUT_REPOSITORIES.add(session, output.id, zenodo.id) is False
        assert await OUTPUT_REPOSITORIES.current_ids(session, output.id) == [zenodo.id]

    async def test_missing_child_violates_foreign_key(self, session, output):
        assert await OUTPUT_REPOSITORIES.add(session, output.id, 4242) is False

    async def test_removing_absent_link_returns_false(self, session, output, zenodo):
        assert await OUTPUT_REPOSITORIES.remove(session, output.id, zenodo.id) is False

    async def test_name_is_table_name(self):
        assert OUTPUT_REPOSITORIES.name == "research_output_repositories"


class TestRepositoryLinkOperations:
    async def test_add_to_output_requires_existing_repository(self, session, output):
        with pytest.raises(AssociationError) as exc_info:
            await get_repository_repository().add_to_output(session, 4242, output.id)

        assert exc_info.value.reason == "not found"

    async def test_round_trip(self, session, output, zenodo):
        repo = get_repository_repository()

        assert await repo.add_to_output(session, zenodo.id, output.id) is True
        assert await repo.remove_from_output(session, zenodo.id, output.id) is True
        assert await repo.remove_from_output(session, zenodo.id, output.id) is False
