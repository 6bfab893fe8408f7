from .provider import ProjectProvider

__all__ = ["ProjectProvider"]
