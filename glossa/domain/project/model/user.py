"""Read model of a registered user, as needed for team invitations."""

from pydantic import BaseModel

from glossa.domain.auth.model.value import UserId


class UserSummary(BaseModel):
    id: UserId
    email: str
    name: str
