"""Report notifier port."""

from typing import Protocol


class ReportNotifier(Protocol):
    """Port for forwarding a finished report to an outbound channel."""

    async def send(self, subject: str, body: str) -> None:
        """Deliver the report text unchanged."""
        ...
