"""Abstract transport interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from email.message import EmailMessage


class Transport(ABC):
    """Base interface for anything able to deliver a composed message."""

    @abstractmethod
    def send(self, message: EmailMessage) -> None:
        """Deliver ``message`` to its recipients."""
