"""Base class for mutable domain entities."""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """A domain object with identity whose attributes may change over its lifetime."""

    model_config = ConfigDict(validate_assignment=True)
