"""Transport that writes each message to a ``.eml`` file."""

from __future__ import annotations

from email.message import EmailMessage
from pathlib import Path

from .base import Transport
from .options import FileOptions


class FileTransport(Transport):
    def __init__(self, options: FileOptions | None = None) -> None:
        self.options = options or FileOptions()
        self.last_file: Path | None = None

    def set_options(self, options: FileOptions) -> None:
        self.options = options

    def send(self, message: EmailMessage) -> None:
        directory = Path(self.options.path)
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / self.options.callback(self)
        target.write_bytes(message.as_bytes())
        self.last_file = target
