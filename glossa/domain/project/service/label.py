"""Project labels."""

import logging

from glossa.domain.auth.model.actor import Actor
from glossa.domain.project.model.label import Label
from glossa.domain.project.model.value import LabelId, ProjectId
from glossa.domain.project.port.label_repository import LabelRepository
from glossa.domain.shared.authorization import Action, PolicySet, ProjectResource
from glossa.domain.shared.authorization.guarded import Guarded
from glossa.domain.shared.authorization.policy_set import describe_actor
from glossa.domain.shared.error import ConflictError, NotFoundError, ValidationError
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise ValidationError("Label name is required", field="name")
    return name


class LabelService(Service):
    _label_repo: LabelRepository
    _policy: PolicySet

    async def load(
        self, actor: Actor, project_id: ProjectId, label_id: LabelId
    ) -> Guarded[Label]:
        self._policy.guard(actor, Action.VIEW_PROJECT, ProjectResource(id=project_id))

        label = await self._label_repo.get(label_id)
        if label is None or label.project_id != project_id:
            raise NotFoundError("Label not found", code="label_not_found")
        return Guarded(label, label.snapshot(), actor, self._policy)

    async def create(
        self,
        actor: Actor,
        project_id: ProjectId,
        name: str,
        color: str | None = None,
        value: str | None = None,
    ) -> Label:
        self._policy.guard(actor, Action.CREATE_LABEL, ProjectResource(id=project_id))

        name = _clean_name(name)
        if await self._label_repo.get_by_name(project_id, name) is not None:
            raise ConflictError("A label with this name already exists", code="label_exists")

        label = Label.create(project_id, name, color, value)
        await self._label_repo.create(label)
        logger.info(
            "Label created: label=%s project=%s by=%s", label.id, project_id, describe_actor(actor)
        )
        return label

    async def update(
        self,
        actor: Actor,
        project_id: ProjectId,
        label_id: LabelId,
        name: str | None = None,
        color: str | None = None,
        value: str | None = None,
    ) -> Label:
        """Edit a label. A request that changes nothing returns it unchanged."""
        guarded = await self.load(actor, project_id, label_id)
        label = guarded.check(Action.UPDATE_LABEL)

        if name is None and color is None and value is None:
            return label
        if name is not None:
            name = _clean_name(name)
            taken = await self._label_repo.get_by_name(project_id, name)
            if taken is not None and taken.id != label.id:
                raise ConflictError("A label with this name already exists", code="label_exists")

        label.edit(name=name, color=color, value=value)
        await self._label_repo.update(label)
        logger.info("Label updated: label=%s by=%s", label.id, describe_actor(actor))
        return label

    async def delete(self, actor: Actor, project_id: ProjectId, label_id: LabelId) -> None:
        guarded = await self.load(actor, project_id, label_id)
        label = guarded.check(Action.DELETE_LABEL)

        await self._label_repo.delete(label.id)
        logger.info("Label deleted: label=%s by=%s", label.id, describe_actor(actor))
