from dishka import AsyncContainer, make_async_container

from glossa.config import Config
from glossa.domain.auth.util.di import AuthProvider
from glossa.domain.project.util.di import ProjectProvider
from glossa.infrastructure.persistence import PersistenceProvider
from glossa.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        PersistenceProvider(),
        AuthProvider(),
        ProjectProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
