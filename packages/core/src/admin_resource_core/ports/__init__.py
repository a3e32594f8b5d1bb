from .database import BaseDatabase
from .resource import BaseResource
from .store import IModelStore

__all__ = [
    "BaseDatabase",
    "BaseResource",
    "IModelStore",
]
