"""Tests for SqlTranslationRepository."""

from uuid import UUID

import pytest

from glossa.domain.project.model.translation import Translation
from glossa.domain.project.model.value import LocaleId, TermId
from glossa.domain.shared.error import ConflictError
from glossa.infrastructure.persistence.repository.translation import SqlTranslationRepository


async def _seed_cell(seed) -> tuple[TermId, LocaleId]:
    owner_id = await seed.user()
    project_id = await seed.project(owner_id)
    term_id = await seed.term(project_id)
    locale_id = await seed.locale(project_id, "fr_FR")
    return TermId(UUID(term_id)), LocaleId(UUID(locale_id))


class TestTranslationRepository:
    @pytest.mark.asyncio
    async def test_create_then_get(self, session, seed) -> None:
        term_id, locale_id = await _seed_cell(seed)
        repo = SqlTranslationRepository(session)
        translation = Translation.create(term_id, locale_id, "Bonjour")

        await repo.create(translation)
        loaded = await repo.get(term_id, locale_id)

        assert loaded is not None
        assert loaded.id == translation.id
        assert loaded.value == "Bonjour"

    @pytest.mark.asyncio
    async def test_duplicate_cell_raises_conflict_and_session_survives(self, session, seed) -> None:
        term_id, locale_id = await _seed_cell(seed)
        repo = SqlTranslationRepository(session)
        first = Translation.create(term_id, locale_id, "Bonjour")
        await repo.create(first)

        with pytest.raises(ConflictError):
            await repo.create(Translation.create(term_id, locale_id, "Salut"))

        await repo.update_value(first.id, "Salut")
        loaded = await repo.get(term_id, locale_id)
        assert loaded is not None
        assert loaded.id == first.id
        assert loaded.value == "Salut"
