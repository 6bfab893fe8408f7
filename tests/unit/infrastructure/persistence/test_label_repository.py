"""Tests for SqlLabelRepository."""

from uuid import UUID

import pytest
from sqlalchemy import func, select

from glossa.domain.project.model.label import Label
from glossa.domain.project.model.value import LabelId, ProjectId, TermId
from glossa.domain.shared.error import ConflictError
from glossa.infrastructure.persistence.repository.label import SqlLabelRepository
from glossa.infrastructure.persistence.repository.term import SqlTermRepository
from glossa.infrastructure.persistence.tables import term_labels_table


class TestLabelRepository:
    @pytest.mark.asyncio
    async def test_create_and_rename(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = ProjectId(UUID(await seed.project(owner_id)))
        repo = SqlLabelRepository(session)
        label = Label.create(project_id, "Marketing", value="mkt")

        await repo.create(label)
        label.edit(name="Growth", color="#00ff00")
        await repo.update(label)

        loaded = await repo.get(label.id)
        assert loaded is not None
        assert (loaded.name, loaded.color, loaded.value) == ("Growth", "#00ff00", "mkt")
        assert await repo.get_by_name(project_id, "Marketing") is None

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = ProjectId(UUID(await seed.project(owner_id)))
        repo = SqlLabelRepository(session)
        await repo.create(Label.create(project_id, "Marketing"))
        legal = Label.create(project_id, "Legal")
        await repo.create(legal)

        with pytest.raises(ConflictError):
            await repo.create(Label.create(project_id, "Marketing"))

        legal.edit(name="Marketing")
        with pytest.raises(ConflictError):
            await repo.update(legal)

    @pytest.mark.asyncio
    async def test_existing_ids_scoped_to_project(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = await seed.project(owner_id)
        other_project = await seed.project(owner_id)
        own = LabelId(UUID(await seed.label(project_id, "Marketing")))
        foreign = LabelId(UUID(await seed.label(other_project, "Marketing")))
        repo = SqlLabelRepository(session)

        found = await repo.existing_ids(ProjectId(UUID(project_id)), [own, foreign])

        assert found == {own}

    @pytest.mark.asyncio
    async def test_delete_detaches_from_terms(self, session, seed) -> None:
        owner_id = await seed.user()
        project_id = await seed.project(owner_id)
        term_id = TermId(UUID(await seed.term(project_id)))
        label_id = LabelId(UUID(await seed.label(project_id, "Marketing")))
        await SqlTermRepository(session).set_labels(term_id, [label_id])
        repo = SqlLabelRepository(session)

        assert await repo.delete(label_id) is True

        links = await session.execute(select(func.count()).select_from(term_labels_table))
        assert links.scalar_one() == 0
