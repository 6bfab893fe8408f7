"""DI provider for the project domain."""

from dishka import provide

from glossa.domain.project.command.label import (
    CreateLabelHandler,
    DeleteLabelHandler,
    UpdateLabelHandler,
)
from glossa.domain.project.command.locale import AddLocaleHandler, RemoveLocaleHandler
from glossa.domain.project.command.member import (
    InviteMemberHandler,
    RemoveMemberHandler,
    UpdateMemberHandler,
)
from glossa.domain.project.command.project import (
    DeleteProjectHandler,
    UpdateProjectSettingsHandler,
)
from glossa.domain.project.command.term import (
    CreateTermHandler,
    DeleteTermHandler,
    SetTermLabelsHandler,
    UpdateTermHandler,
)
from glossa.domain.project.command.term_lock import SetAllTermsLockHandler, SetTermLockHandler
from glossa.domain.project.command.translation import UpsertTranslationHandler
from glossa.domain.project.port.label_repository import LabelRepository
from glossa.domain.project.port.locale_repository import LocaleRepository
from glossa.domain.project.port.member_repository import MemberRepository
from glossa.domain.project.port.project_repository import ProjectRepository
from glossa.domain.project.port.term_repository import TermRepository
from glossa.domain.project.port.translation_repository import TranslationRepository
from glossa.domain.project.port.user_repository import UserDirectory
from glossa.domain.project.query.list_members import ListMembersHandler
from glossa.domain.project.service.label import LabelService
from glossa.domain.project.service.locale import LocaleService
from glossa.domain.project.service.member import MemberService
from glossa.domain.project.service.project import ProjectService
from glossa.domain.project.service.term import TermService
from glossa.domain.project.service.term_lock import TermLockService
from glossa.domain.project.service.translation import TranslationService
from glossa.domain.shared.authorization import PolicySet
from glossa.util.di.base import Provider
from glossa.util.di.scope import Scope


class ProjectProvider(Provider):
    """DI provider for project services and handlers."""

    # Command Handlers
    create_term_handler = provide(CreateTermHandler, scope=Scope.UOW)
    update_term_handler = provide(UpdateTermHandler, scope=Scope.UOW)
    delete_term_handler = provide(DeleteTermHandler, scope=Scope.UOW)
    set_term_labels_handler = provide(SetTermLabelsHandler, scope=Scope.UOW)
    set_term_lock_handler = provide(SetTermLockHandler, scope=Scope.UOW)
    set_all_terms_lock_handler = provide(SetAllTermsLockHandler, scope=Scope.UOW)
    upsert_translation_handler = provide(UpsertTranslationHandler, scope=Scope.UOW)
    invite_member_handler = provide(InviteMemberHandler, scope=Scope.UOW)
    update_member_handler = provide(UpdateMemberHandler, scope=Scope.UOW)
    remove_member_handler = provide(RemoveMemberHandler, scope=Scope.UOW)
    delete_project_handler = provide(DeleteProjectHandler, scope=Scope.UOW)
    update_project_settings_handler = provide(UpdateProjectSettingsHandler, scope=Scope.UOW)
    create_label_handler = provide(CreateLabelHandler, scope=Scope.UOW)
    update_label_handler = provide(UpdateLabelHandler, scope=Scope.UOW)
    delete_label_handler = provide(DeleteLabelHandler, scope=Scope.UOW)
    add_locale_handler = provide(AddLocaleHandler, scope=Scope.UOW)
    remove_locale_handler = provide(RemoveLocaleHandler, scope=Scope.UOW)

    # Query Handlers
    list_members_handler = provide(ListMembersHandler, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_term_lock_service(
        self, term_repo: TermRepository, policy: PolicySet
    ) -> TermLockService:
        return TermLockService(_term_repo=term_repo, _policy=policy)

    @provide(scope=Scope.UOW)
    def get_translation_service(
        self,
        translation_repo: TranslationRepository,
        term_repo: TermRepository,
        locale_repo: LocaleRepository,
        policy: PolicySet,
    ) -> TranslationService:
        return TranslationService(
            _translation_repo=translation_repo,
            _term_repo=term_repo,
            _locale_repo=locale_repo,
            _policy=policy,
        )

    @provide(scope=Scope.UOW)
    def get_member_service(
        self,
        member_repo: MemberRepository,
        project_repo: ProjectRepository,
        locale_repo: LocaleRepository,
        users: UserDirectory,
        policy: PolicySet,
    ) -> MemberService:
        return MemberService(
            _member_repo=member_repo,
            _project_repo=project_repo,
            _locale_repo=locale_repo,
            _users=users,
            _policy=policy,
        )

    @provide(scope=Scope.UOW)
    def get_project_service(
        self, project_repo: ProjectRepository, policy: PolicySet
    ) -> ProjectService:
        return ProjectService(_project_repo=project_repo, _policy=policy)

    @provide(scope=Scope.UOW)
    def get_term_service(
        self, term_repo: TermRepository, label_repo: LabelRepository, policy: PolicySet
    ) -> TermService:
        return TermService(_term_repo=term_repo, _label_repo=label_repo, _policy=policy)

    @provide(scope=Scope.UOW)
    def get_label_service(self, label_repo: LabelRepository, policy: PolicySet) -> LabelService:
        return LabelService(_label_repo=label_repo, _policy=policy)

    @provide(scope=Scope.UOW)
    def get_locale_service(
        self, locale_repo: LocaleRepository, policy: PolicySet
    ) -> LocaleService:
        return LocaleService(_locale_repo=locale_repo, _policy=policy)
