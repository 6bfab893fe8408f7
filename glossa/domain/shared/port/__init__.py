"""Port marker for hexagonal boundaries."""

from typing import Protocol


class Port(Protocol):
    """Marker base for outbound ports (repositories, lookups, gateways).

    Domain code depends only on ports; infrastructure adapters implement them
    and are bound in the DI providers.
    """
