"""Outbound mail adapter."""

from .smtp import RecordingNotifier, SmtpNotifier, resolve_smtp_server

__all__ = ["RecordingNotifier", "SmtpNotifier", "resolve_smtp_server"]
