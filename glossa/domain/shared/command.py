"""Command and CommandHandler base classes with an authentication gate.

Handlers are dataclasses holding their collaborators plus the request's raw
``identity``. The gate rejects anonymous requests before ``run()`` executes;
resource-level decisions happen inside the services, where the resource
state is loaded.
"""

from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, ClassVar, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel


class Command(BaseModel):
    __public__: ClassVar[bool] = False


class Result(BaseModel): ...


C = TypeVar("C", bound=BaseModel)
R = TypeVar("R", bound=BaseModel)

# Unbound async handler method: (self, cmd) -> Coroutine -> Result
_HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def wrap_run_with_auth(original_run: _HandlerMethod) -> _HandlerMethod:
    """Wrap run() so that anonymous identities never reach the handler body."""

    @wraps(original_run)
    async def auth_wrapped_run(self: Any, cmd: Any) -> Any:
        from glossa.domain.auth.model.identity import Anonymous, Identity
        from glossa.domain.shared.error import NotAuthenticatedError

        if getattr(type(cmd), "__public__", False):
            return await original_run(self, cmd)

        identity = getattr(self, "identity", None)
        if not isinstance(identity, Identity) or isinstance(identity, Anonymous):
            raise NotAuthenticatedError()

        return await original_run(self, cmd)

    return auth_wrapped_run


@dataclass_transform()
class HandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and the auth gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = wrap_run_with_auth(original_run)

        return cls


class CommandHandler(Generic[C, R], metaclass=HandlerMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    Declare the request identity as a field:
        class LockTermHandler(CommandHandler[SetTermLock, TermLockResult]):
            identity: Identity
            actor_builder: ActorContextBuilder
    """

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
