"""Mail service assembled by :class:`mailer_core.factory.MailServiceFactory`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Any, Mapping

from mailer_core.events import (
    POST_SEND_EVENT,
    PRE_RENDER_EVENT,
    PRE_SEND_EVENT,
    SEND_ERROR_EVENT,
    EventBus,
)
from mailer_core.renderer import MailViewRenderer
from mailer_core.transport import Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendResult:
    message: EmailMessage
    valid: bool = True


class MailService:
    """Render and send messages, notifying listeners through ``events``."""

    def __init__(
        self,
        transport: Transport,
        renderer: MailViewRenderer,
        events: EventBus | None = None,
    ) -> None:
        self.transport = transport
        self.renderer = renderer
        self.events = events or EventBus()

    def render(self, template: str, params: Mapping[str, Any] | None = None) -> str:
        self.events.emit(
            PRE_RENDER_EVENT,
            {"mail_service": self, "template": template, "params": dict(params or {})},
        )
        return self.renderer.render(template, params)

    def send(
        self,
        message: EmailMessage,
        template: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> SendResult:
        """Deliver ``message``; when ``template`` is given it becomes the HTML body."""

        if template is not None:
            message.set_content(self.render(template, params), subtype="html")

        payload = {"mail_service": self, "message": message}
        self.events.emit(PRE_SEND_EVENT, payload)
        try:
            self.transport.send(message)
        except Exception as exc:
            logger.error("sending %r failed: %s", message.get("Subject"), exc)
            self.events.emit(SEND_ERROR_EVENT, {**payload, "error": exc})
            raise

        result = SendResult(message=message)
        self.events.emit(POST_SEND_EVENT, {**payload, "result": result})
        return result
