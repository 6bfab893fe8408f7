"""Term content: creation, edits, deletion and label assignment."""

import logging

from glossa.domain.auth.model.actor import Actor
from glossa.domain.project.model.term import Term
from glossa.domain.project.model.value import LabelId, ProjectId, TermId
from glossa.domain.project.port.label_repository import LabelRepository
from glossa.domain.project.port.term_repository import TermRepository
from glossa.domain.shared.authorization import Action, PolicySet, ProjectResource
from glossa.domain.shared.authorization.guarded import Guarded
from glossa.domain.shared.authorization.policy_set import describe_actor
from glossa.domain.shared.error import ConflictError, NotFoundError, ValidationError
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


async def load_term(
    term_repo: TermRepository,
    policy: PolicySet,
    actor: Actor,
    project_id: ProjectId,
    term_id: TermId,
) -> Guarded[Term]:
    """Load a term of the project, wrapped with the snapshot it will be judged on."""
    policy.guard(actor, Action.VIEW_PROJECT, ProjectResource(id=project_id))

    term = await term_repo.get(term_id)
    if term is None or term.project_id != project_id:
        raise NotFoundError("Term not found", code="term_not_found")
    return Guarded(term, term.snapshot(), actor, policy)


def _clean_value(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValidationError("Term value is required", field="value")
    return value


class TermService(Service):
    """Terms are structural: only admins and owners create, edit or delete them.

    Editors may attach labels, except to a locked term.
    """

    _term_repo: TermRepository
    _label_repo: LabelRepository
    _policy: PolicySet

    async def load(self, actor: Actor, project_id: ProjectId, term_id: TermId) -> Guarded[Term]:
        return await load_term(self._term_repo, self._policy, actor, project_id, term_id)

    async def create(
        self,
        actor: Actor,
        project_id: ProjectId,
        value: str,
        context: str | None = None,
    ) -> Term:
        self._policy.guard(actor, Action.CREATE_TERM, ProjectResource(id=project_id))

        value = _clean_value(value)
        await self._check_value_free(project_id, value)

        term = Term.create(project_id, value, context)
        await self._term_repo.create(term)
        logger.info(
            "Term created: term=%s project=%s by=%s", term.id, project_id, describe_actor(actor)
        )
        return term

    async def update(
        self,
        actor: Actor,
        project_id: ProjectId,
        term_id: TermId,
        value: str | None = None,
        context: str | None = None,
    ) -> Term:
        guarded = await self.load(actor, project_id, term_id)
        term = guarded.check(Action.UPDATE_TERM)

        if value is None and context is None:
            raise ValidationError("Nothing to update")
        if value is not None:
            value = _clean_value(value)
            if value != term.value:
                await self._check_value_free(project_id, value)

        term.edit(value=value, context=context)
        await self._term_repo.update_content(term)
        logger.info("Term updated: term=%s by=%s", term.id, describe_actor(actor))
        return term

    async def delete(self, actor: Actor, project_id: ProjectId, term_id: TermId) -> None:
        guarded = await self.load(actor, project_id, term_id)
        term = guarded.check(Action.DELETE_TERM)

        await self._term_repo.delete(term.id)
        logger.info("Term deleted: term=%s by=%s", term.id, describe_actor(actor))

    async def set_labels(
        self,
        actor: Actor,
        project_id: ProjectId,
        term_id: TermId,
        label_ids: list[LabelId],
    ) -> list[LabelId]:
        """Replace the term's labels. Every label must belong to the same project."""
        guarded = await self.load(actor, project_id, term_id)
        term = guarded.check(Action.SET_TERM_LABELS)

        label_ids = list(dict.fromkeys(label_ids))
        found = await self._label_repo.existing_ids(project_id, label_ids)
        if len(found) != len(label_ids):
            raise ValidationError(
                "One or more labels do not belong to this project", field="labelIds"
            )

        await self._term_repo.set_labels(term.id, label_ids)
        logger.info(
            "Term labels set: term=%s labels=%d by=%s",
            term.id,
            len(label_ids),
            describe_actor(actor),
        )
        return label_ids

    async def _check_value_free(self, project_id: ProjectId, value: str) -> None:
        if await self._term_repo.get_by_value(project_id, value) is not None:
            raise ConflictError("A term with this value already exists", code="term_exists")
