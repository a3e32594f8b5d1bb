"""Resource adapter configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ResourceConfig:
    """Defaults applied by :class:`~admin_resource_sqlalchemy.resource.Resource`.

    Attributes:
        default_limit: Page size when ``find`` gets no options.
        max_limit: Upper bound for any requested page size.
        default_direction: Sort direction when none is requested.
    """

    default_limit: int = 20
    max_limit: int = 500
    default_direction: Literal["asc", "desc"] = "asc"
