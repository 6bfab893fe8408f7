"""GetProjectPermissions query: capability flags for UI gating.

Every flag is computed by the policy engine against the caller's actor, so the
UI can never disagree with what the API will enforce.
"""

from uuid import UUID

from glossa.domain.auth.model.actor import ApiKeyActor, Member, Owner
from glossa.domain.auth.model.identity import Identity
from glossa.domain.auth.service.actor import ActorContextBuilder
from glossa.domain.project.model.value import LocaleCode, ProjectId
from glossa.domain.shared.authorization import Action, PolicySet, ProjectResource
from glossa.domain.shared.query import Query, QueryHandler, Result


class GetProjectPermissions(Query):
    project_id: UUID


class ProjectPermissions(Result):
    role: str
    is_owner: bool
    can_manage_project: bool
    can_delete_project: bool
    can_manage_terms: bool
    can_lock_terms: bool
    can_manage_locales: bool
    can_manage_labels: bool
    can_translate: bool
    can_view_team: bool
    can_manage_team: bool
    can_manage_api_keys: bool
    assigned_locales: list[LocaleCode] | None = None


class GetProjectPermissionsHandler(QueryHandler[GetProjectPermissions, ProjectPermissions]):
    identity: Identity
    actor_builder: ActorContextBuilder
    policy: PolicySet

    async def run(self, query: GetProjectPermissions) -> ProjectPermissions:
        project_id = ProjectId(query.project_id)
        actor = await self.actor_builder.build(self.identity, project_id)
        resource = ProjectResource(id=project_id)
        self.policy.guard(actor, Action.VIEW_PROJECT, resource)

        def can(action: Action) -> bool:
            return self.policy.is_allowed(actor, action, resource)

        assigned: list[LocaleCode] | None = None
        if isinstance(actor, Member) and actor.locale_restriction is not None:
            assigned = sorted(actor.locale_restriction)

        return ProjectPermissions(
            role=_role_name(actor),
            is_owner=isinstance(actor, Owner),
            can_manage_project=can(Action.MANAGE_PROJECT_SETTINGS),
            can_delete_project=can(Action.DELETE_PROJECT),
            can_manage_terms=can(Action.CREATE_TERM),
            can_lock_terms=can(Action.LOCK_TERM),
            can_manage_locales=can(Action.ADD_LOCALE),
            can_manage_labels=can(Action.CREATE_LABEL),
            can_translate=can(Action.TRANSLATE_LOCALE),
            can_view_team=can(Action.LIST_MEMBERS),
            can_manage_team=can(Action.INVITE_MEMBER),
            can_manage_api_keys=can(Action.CREATE_API_KEY),
            assigned_locales=assigned,
        )


def _role_name(actor: object) -> str:
    if isinstance(actor, Owner):
        return "owner"
    if isinstance(actor, (Member, ApiKeyActor)):
        return str(actor.role)
    return "none"
