"""Read-only port onto registered users."""

from abc import abstractmethod
from typing import Protocol

from glossa.domain.project.model.user import UserSummary
from glossa.domain.shared.port import Port


class UserDirectory(Port, Protocol):
    @abstractmethod
    async def get_by_email(self, email: str) -> UserSummary | None:
        ...
