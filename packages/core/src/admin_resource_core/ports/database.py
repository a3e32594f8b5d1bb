"""BaseDatabase — groups the resources of one data source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .resource import BaseResource


class BaseDatabase(ABC):
    @classmethod
    @abstractmethod
    def is_adapter_for(cls, raw_database: Any) -> bool: ...

    @abstractmethod
    def resources(self) -> list[BaseResource]: ...
