"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

# JSON-shaped response body handed to the interface layer
Payload = dict[str, Any]


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
