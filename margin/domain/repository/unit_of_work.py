"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commits the repositories' pending writes for the current request.

    Anything left uncommitted is still committed when the request ends;
    use cases commit early when later steps, such as cache invalidation,
    must only run once the write is visible to other requests.
    """

    @abstractmethod
    async def commit(self) -> None:
        pass
