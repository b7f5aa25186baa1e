"""Smoke tests for MailerApp wiring."""

from __future__ import annotations

from email.message import EmailMessage
from pathlib import Path

import pytest

from mailer_core import MailerApp
from mailer_core.errors import ConfigurationNotFoundError
from mailer_core.transport import FileTransport, InMemoryTransport


def test_app_builds_services_from_yaml(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "welcome.html").write_text("Welcome {{ name }}")
    config_file = tmp_path / "mailer.yml"
    config_file.write_text(
        "mailer_options:\n"
        f"  template_paths: [\"{templates}\"]\n"
        "  mail_services:\n"
        "    base:\n"
        "      transport: file\n"
        "      transport_options:\n"
        f"        path: \"{tmp_path / 'out'}\"\n"
        "    testing:\n"
        "      extends: base\n"
        "      transport: in_memory\n"
    )
    app = MailerApp(config_path=config_file)

    assert app.service_names() == ("base", "testing")
    base = app.mail_service("base")
    assert isinstance(base.transport, FileTransport)
    assert base.transport.options.path == str(tmp_path / "out")

    testing = app.mail_service("testing")
    assert isinstance(testing.transport, InMemoryTransport)
    assert testing.render("welcome.html", {"name": "Ana"}) == "Welcome Ana"


def test_app_caches_services_per_name() -> None:
    app = MailerApp({"mailer_options": {"mail_services": {"default": {"transport": "null"}}}})
    service = app.mail_service("default")

    assert service is app.mail_service("default")
    assert isinstance(service.transport, InMemoryTransport)

    message = EmailMessage()
    message["Subject"] = "ping"
    service.send(message)
    assert service.transport.last_message is message


def test_app_unknown_service_fails() -> None:
    app = MailerApp({})
    with pytest.raises(ConfigurationNotFoundError):
        app.mail_service("missing")
