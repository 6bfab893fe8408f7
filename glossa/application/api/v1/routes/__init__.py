from glossa.application.api.v1.routes import (
    api_keys,
    labels,
    members,
    projects,
    terms,
    translations,
)

__all__ = ["api_keys", "labels", "members", "projects", "terms", "translations"]
