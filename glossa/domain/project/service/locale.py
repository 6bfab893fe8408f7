"""Enabling and disabling locales on a project."""

import logging

from glossa.domain.auth.model.actor import Actor
from glossa.domain.project.model.locale import SUPPORTED_LOCALES, Locale
from glossa.domain.project.model.value import LocaleCode, ProjectId
from glossa.domain.project.port.locale_repository import LocaleRepository
from glossa.domain.shared.authorization import Action, PolicySet, ProjectResource
from glossa.domain.shared.authorization.guarded import Guarded
from glossa.domain.shared.authorization.policy_set import describe_actor
from glossa.domain.shared.error import ConflictError, NotFoundError, ValidationError
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


class LocaleService(Service):
    """Only codes from SUPPORTED_LOCALES can be enabled.

    Removing a locale removes every translation written in it.
    """

    _locale_repo: LocaleRepository
    _policy: PolicySet

    async def load(
        self, actor: Actor, project_id: ProjectId, code: LocaleCode
    ) -> Guarded[Locale]:
        self._policy.guard(actor, Action.VIEW_PROJECT, ProjectResource(id=project_id))

        locale = await self._locale_repo.get_by_code(project_id, code)
        if locale is None:
            raise NotFoundError("Locale not found", code="locale_not_found")
        return Guarded(locale, locale.snapshot(), actor, self._policy)

    async def add(self, actor: Actor, project_id: ProjectId, code: LocaleCode) -> Locale:
        self._policy.guard(actor, Action.ADD_LOCALE, ProjectResource(id=project_id))

        code = code.strip()
        if not code:
            raise ValidationError("Locale code is required", field="code")
        info = SUPPORTED_LOCALES.get(code)
        if info is None:
            raise ValidationError(f"Unsupported locale code: {code}", field="code")
        if await self._locale_repo.get_by_code(project_id, code) is not None:
            raise ConflictError(
                "This locale is already enabled for the project", code="locale_exists"
            )

        locale = Locale.create(project_id, code, info)
        await self._locale_repo.create(locale)
        logger.info(
            "Locale added: project=%s code=%s by=%s", project_id, code, describe_actor(actor)
        )
        return locale

    async def remove(self, actor: Actor, project_id: ProjectId, code: LocaleCode) -> None:
        guarded = await self.load(actor, project_id, code)
        locale = guarded.check(Action.DELETE_LOCALE)

        await self._locale_repo.delete(locale.id)
        logger.info(
            "Locale removed: project=%s code=%s by=%s", project_id, code, describe_actor(actor)
        )
