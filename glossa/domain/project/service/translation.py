"""Writing translation cells."""

import logging

from glossa.domain.auth.model.actor import Actor
from glossa.domain.project.model.translation import Translation
from glossa.domain.project.model.value import LocaleCode, ProjectId, TermId
from glossa.domain.project.port.locale_repository import LocaleRepository
from glossa.domain.project.port.term_repository import TermRepository
from glossa.domain.project.port.translation_repository import TranslationRepository
from glossa.domain.shared.authorization import (
    Action,
    PolicySet,
    ProjectResource,
    TranslationResource,
)
from glossa.domain.shared.error import ConflictError, NotFoundError, ValidationError
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


class TranslationService(Service):
    _translation_repo: TranslationRepository
    _term_repo: TermRepository
    _locale_repo: LocaleRepository
    _policy: PolicySet

    async def upsert(
        self,
        actor: Actor,
        project_id: ProjectId,
        locale_code: LocaleCode,
        term_id: TermId,
        value: str,
    ) -> Translation:
        """Set the value of one (term, locale) cell, creating it if missing.

        The term's lock flag is read once; the decision and the write both use
        that snapshot. A concurrent first write for the same cell surfaces as a
        conflict on insert and is retried as an update.
        """
        # Role check precedes input validation
        self._policy.guard(actor, Action.TRANSLATE_LOCALE, ProjectResource(id=project_id))

        if not value:
            raise ValidationError("Translation value is required", field="value")

        locale = await self._locale_repo.get_by_code(project_id, locale_code)
        if locale is None:
            raise NotFoundError("Locale not found", code="locale_not_found")

        term = await self._term_repo.get(term_id)
        if term is None or term.project_id != project_id:
            raise NotFoundError("Term not found", code="term_not_found")

        snapshot = TranslationResource(
            term_id=term.id,
            locale_code=locale.code,
            project_id=project_id,
            term_locked=term.locked,
        )
        self._policy.guard(actor, Action.TRANSLATE_LOCALE, snapshot)

        existing = await self._translation_repo.get(term.id, locale.id)
        if existing is not None:
            return await self._update(existing, value)

        translation = Translation.create(term.id, locale.id, value)
        try:
            await self._translation_repo.create(translation)
        except ConflictError:
            logger.info(
                "Concurrent insert for term=%s locale=%s, retrying as update",
                term.id,
                locale.code,
            )
            existing = await self._translation_repo.get(term.id, locale.id)
            if existing is None:
                raise
            return await self._update(existing, value)
        return translation

    async def _update(self, translation: Translation, value: str) -> Translation:
        translation.set_value(value)
        await self._translation_repo.update_value(translation.id, value)
        return translation
