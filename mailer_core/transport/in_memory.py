"""Transport that keeps sent messages in memory (tests, ``null`` alias)."""

from __future__ import annotations

from email.message import EmailMessage

from .base import Transport


class InMemoryTransport(Transport):
    def __init__(self) -> None:
        self.messages: list[EmailMessage] = []

    def send(self, message: EmailMessage) -> None:
        self.messages.append(message)

    @property
    def last_message(self) -> EmailMessage | None:
        return self.messages[-1] if self.messages else None
