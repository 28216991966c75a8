"""Outbound notification adapters."""

from njt_departures.adapters.notification.email_notifier import EmailNotifier

__all__ = ["EmailNotifier"]
