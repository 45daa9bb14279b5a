"""Factories for feature tests against SQLite."""

from __future__ import annotations

import itertools

import pytest

from dmp_service.features.affiliations import Affiliation
from dmp_service.features.projects import Project
from dmp_service.features.users import User

_seq = itertools.count(1)


@pytest.fixture
def make():
    """Persist a model instance and return it with its generated id.

    Example:
        license = await make(session, License, uri="https://spdx.org/licenses/MIT", name="MIT")
    """

    async def _make(session, model, **values):
        instance = model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    return _make


@pytest.fixture
async def affiliation(session, make) -> Affiliation:
    n = next(_seq)
    return await make(
        session,
        Affiliation,
        uri=f"https://ror.org/{n:05d}",
        name=f"University {n}",
        display_name=f"University {n} (U{n})",
    )


@pytest.fixture
async def user(session, make, affiliation) -> User:
    n = next(_seq)
    return await make(
        session,
        User,
        given_name="Ada",
        sur_name=f"Lovelace{n}",
        email=f"ada{n}@example.org",
        affiliation_id=affiliation.id,
    )


@pytest.fixture
async def project(session, make, user) -> Project:
    return await make(session, Project, title="Coral reef survey", created_by_id=user.id)
