from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from glossa.config import Config
from glossa.domain.auth.port.api_key_repository import ApiKeyRepository
from glossa.domain.auth.port.membership import MembershipLookup
from glossa.domain.project.port.label_repository import LabelRepository
from glossa.domain.project.port.locale_repository import LocaleRepository
from glossa.domain.project.port.member_repository import MemberRepository
from glossa.domain.project.port.project_repository import ProjectRepository
from glossa.domain.project.port.term_repository import TermRepository
from glossa.domain.project.port.translation_repository import TranslationRepository
from glossa.domain.project.port.user_repository import UserDirectory
from glossa.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from glossa.infrastructure.persistence.repository.api_key import SqlApiKeyRepository
from glossa.infrastructure.persistence.repository.label import SqlLabelRepository
from glossa.infrastructure.persistence.repository.locale import SqlLocaleRepository
from glossa.infrastructure.persistence.repository.member import SqlMemberRepository
from glossa.infrastructure.persistence.repository.membership import SqlMembershipLookup
from glossa.infrastructure.persistence.repository.project import SqlProjectRepository
from glossa.infrastructure.persistence.repository.term import SqlTermRepository
from glossa.infrastructure.persistence.repository.translation import (
    SqlTranslationRepository,
)
from glossa.infrastructure.persistence.repository.user import SqlUserDirectory
from glossa.util.di.base import Provider
from glossa.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    def get_engine(self, config: Config) -> AsyncEngine:
        return create_db_engine(config)

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    # Auth adapters
    membership = provide(SqlMembershipLookup, scope=Scope.UOW, provides=MembershipLookup)
    api_key_repo = provide(SqlApiKeyRepository, scope=Scope.UOW, provides=ApiKeyRepository)

    # Project adapters
    project_repo = provide(SqlProjectRepository, scope=Scope.UOW, provides=ProjectRepository)
    term_repo = provide(SqlTermRepository, scope=Scope.UOW, provides=TermRepository)
    translation_repo = provide(
        SqlTranslationRepository,
        scope=Scope.UOW,
        provides=TranslationRepository,
    )
    locale_repo = provide(SqlLocaleRepository, scope=Scope.UOW, provides=LocaleRepository)
    label_repo = provide(SqlLabelRepository, scope=Scope.UOW, provides=LabelRepository)
    member_repo = provide(SqlMemberRepository, scope=Scope.UOW, provides=MemberRepository)
    user_directory = provide(SqlUserDirectory, scope=Scope.UOW, provides=UserDirectory)
