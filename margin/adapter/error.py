"""Adapter layer errors.

Failures of external collaborators. The interface layer reports all of
them as a generic upstream error.
"""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class SpamCheckError(ProviderError):
    """Spam checking service failed or answered something unexpected."""

    pass


class NotificationError(ProviderError):
    """Mail delivery failed."""

    pass
