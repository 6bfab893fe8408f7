"""Term lock transitions, single and bulk."""

import logging

from glossa.domain.auth.model.actor import Actor
from glossa.domain.project.model.term import Term
from glossa.domain.project.model.value import ProjectId, TermId
from glossa.domain.project.port.term_repository import TermRepository
from glossa.domain.project.service.term import load_term
from glossa.domain.shared.authorization import Action, PolicySet, ProjectResource
from glossa.domain.shared.authorization.guarded import Guarded
from glossa.domain.shared.authorization.policy_set import describe_actor
from glossa.domain.shared.authorization.term_lock import lock_action
from glossa.domain.shared.service import Service

logger = logging.getLogger(__name__)


class TermLockService(Service):
    """Locks and unlocks terms.

    Transitions are unconditional once authorized: locking a locked term is
    a no-op, and two concurrent toggles resolve last-write-wins.
    """

    _term_repo: TermRepository
    _policy: PolicySet

    async def load(self, actor: Actor, project_id: ProjectId, term_id: TermId) -> Guarded[Term]:
        return await load_term(self._term_repo, self._policy, actor, project_id, term_id)

    async def set_lock(
        self,
        actor: Actor,
        project_id: ProjectId,
        term_id: TermId,
        locked: bool,
    ) -> Term:
        guarded = await self.load(actor, project_id, term_id)
        term = guarded.check(lock_action(locked))

        changed = term.set_locked(locked)
        await self._term_repo.set_locked(term.id, locked)
        logger.info(
            "Term %s: term=%s actor=%s changed=%s",
            "locked" if locked else "unlocked",
            term.id,
            describe_actor(actor),
            changed,
        )
        return term

    async def set_all_locked(self, actor: Actor, project_id: ProjectId, locked: bool) -> int:
        self._policy.guard(actor, lock_action(locked, bulk=True), ProjectResource(id=project_id))

        count = await self._term_repo.set_all_locked(project_id, locked)
        logger.info(
            "Bulk %s: project=%s actor=%s terms=%d",
            "lock" if locked else "unlock",
            project_id,
            describe_actor(actor),
            count,
        )
        return count
