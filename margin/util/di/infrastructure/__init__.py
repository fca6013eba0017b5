"""Infrastructure providers."""

# Import bases
from .mail import MailProvider
from .persistence import PersistenceProvider
from .render import ProdRenderProvider
from .spam import SpamProvider

# Import implementations (needed for __subclasses__())
from .mail import ProdMailProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .spam import ProdSpamProvider  # noqa: F401

__all__ = [
    "MailProvider",
    "PersistenceProvider",
    "ProdMailProvider",
    "ProdPersistenceProvider",
    "ProdRenderProvider",
    "ProdSpamProvider",
    "SpamProvider",
]
