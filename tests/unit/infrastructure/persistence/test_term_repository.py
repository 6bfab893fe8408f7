"""Tests for SqlTermRepository and project deletion cascade."""

from uuid import UUID

import pytest
from sqlalchemy import select

from glossa.domain.project.model.term import Term
from glossa.domain.project.model.value import LabelId, ProjectId, TermId
from glossa.infrastructure.persistence.repository.project import SqlProjectRepository
from glossa.infrastructure.persistence.repository.term import SqlTermRepository
from glossa.infrastructure.persistence.tables import term_labels_table


class TestTermRepository:
    @pytest.mark.asyncio
    async def test_set_locked(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = await seed.project(owner_id)
        term_id = TermId(UUID(await seed.term(project_id)))
        repo = SqlTermRepository(session)

        await repo.set_locked(term_id, True)

        term = await repo.get(term_id)
        assert term is not None
        assert term.locked is True

    @pytest.mark.asyncio
    async def test_set_all_locked_scoped_to_project(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = await seed.project(owner_id)
        other_project = await seed.project(owner_id)
        await seed.term(project_id)
        await seed.term(project_id, locked=True)
        other_term = TermId(UUID(await seed.term(other_project)))
        repo = SqlTermRepository(session)

        count = await repo.set_all_locked(ProjectId(UUID(project_id)), True)

        assert count == 2
        untouched = await repo.get(other_term)
        assert untouched is not None
        assert untouched.locked is False


class TestProjectRepository:
    @pytest.mark.asyncio
    async def test_delete_cascades_to_terms(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = await seed.project(owner_id)
        term_id = TermId(UUID(await seed.term(project_id)))
        projects = SqlProjectRepository(session)

        assert await projects.delete(ProjectId(UUID(project_id))) is True

        assert await SqlTermRepository(session).get(term_id) is None
        assert await projects.get_owner_id(ProjectId(UUID(project_id))) is None


class TestTermContent:
    @pytest.mark.asyncio
    async def test_create_find_and_edit(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = ProjectId(UUID(await seed.project(owner_id)))
        repo = SqlTermRepository(session)
        term = Term.create(project_id, "nav.home", "Top menu")

        await repo.create(term)
        found = await repo.get_by_value(project_id, "nav.home")
        assert found is not None
        assert found.id == term.id

        term.lock()
        await repo.set_locked(term.id, True)
        term.edit(context="Header link")
        await repo.update_content(term)

        reloaded = await repo.get(term.id)
        assert reloaded is not None
        assert reloaded.context == "Header link"
        assert reloaded.locked is True

    @pytest.mark.asyncio
    async def test_set_labels_replaces_links(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = await seed.project(owner_id)
        term_id = TermId(UUID(await seed.term(project_id)))
        first = LabelId(UUID(await seed.label(project_id, "Marketing")))
        second = LabelId(UUID(await seed.label(project_id, "Legal")))
        repo = SqlTermRepository(session)

        await repo.set_labels(term_id, [first, second])
        await repo.set_labels(term_id, [second])

        linked = await session.execute(
            select(term_labels_table.c.label_id).where(
                term_labels_table.c.term_id == str(term_id)
            )
        )
        assert linked.scalars().all() == [str(second)]

    @pytest.mark.asyncio
    async def test_delete(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = await seed.project(owner_id)
        term_id = TermId(UUID(await seed.term(project_id)))
        repo = SqlTermRepository(session)

        assert await repo.delete(term_id) is True
        assert await repo.get(term_id) is None
        assert await repo.delete(term_id) is False
