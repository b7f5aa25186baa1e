"""Local delivery through the sendmail binary."""

from __future__ import annotations

import logging
import subprocess
from email.message import EmailMessage
from typing import Sequence

from .base import Transport

DEFAULT_SENDMAIL_PATH = "/usr/sbin/sendmail"

logger = logging.getLogger(__name__)


class SendmailTransport(Transport):
    """Pipe messages into ``sendmail -t -i``."""

    def __init__(
        self,
        path: str = DEFAULT_SENDMAIL_PATH,
        parameters: Sequence[str] = ("-t", "-i"),
    ) -> None:
        self.path = path
        self.parameters = tuple(parameters)

    def command(self) -> list[str]:
        return [self.path, *self.parameters]

    def send(self, message: EmailMessage) -> None:
        cmd = self.command()
        logger.debug("sendmail cmd=%s", cmd)
        subprocess.run(cmd, input=message.as_bytes(), check=True, capture_output=True)
