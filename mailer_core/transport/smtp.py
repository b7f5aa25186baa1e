"""SMTP delivery built on :mod:`smtplib`."""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage

from .base import Transport
from .options import SmtpOptions

logger = logging.getLogger(__name__)


class SmtpTransport(Transport):
    def __init__(self, options: SmtpOptions | None = None) -> None:
        self.options = options or SmtpOptions()

    def set_options(self, options: SmtpOptions) -> None:
        self.options = options

    def _connect(self) -> smtplib.SMTP:
        opts = self.options
        timeout = opts.connection_time_limit
        kwargs = {"local_hostname": opts.name}
        if timeout is not None:
            kwargs["timeout"] = timeout
        if opts.connection_config.get("ssl") == "ssl" or opts.connection_class == "ssl":
            return smtplib.SMTP_SSL(opts.host, opts.port, **kwargs)
        client = smtplib.SMTP(opts.host, opts.port, **kwargs)
        if opts.connection_config.get("ssl") == "tls":
            client.starttls()
        return client

    def send(self, message: EmailMessage) -> None:
        opts = self.options
        logger.debug("smtp send host=%s port=%s", opts.host, opts.port)
        with self._connect() as client:
            username = opts.connection_config.get("username")
            if username and opts.connection_class in ("login", "plain", "ssl"):
                client.login(username, opts.connection_config.get("password", ""))
            client.send_message(message)
