"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; changes produce a new validated instance.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied and re-validated."""
        return self.model_validate({**self.model_dump(), **changes})
