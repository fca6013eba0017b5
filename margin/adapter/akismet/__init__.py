"""Akismet spam checking adapter."""

from .client import (
    AkismetSpamChecker,
    DisabledSpamChecker,
    MockSpamChecker,
)

__all__ = [
    "AkismetSpamChecker",
    "DisabledSpamChecker",
    "MockSpamChecker",
]
