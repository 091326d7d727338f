"""Hyprland provider using the compositor's request socket."""

from __future__ import annotations

import logging
import socket
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from core.config_runtime import section, timeout
from core.errors import ConfigurationError, IPCConnectionError, NotFoundError, ProtocolError
from core.platform_detector import HYPRLAND_SIGNATURE_VAR
from providers.base_provider import BaseWindowProvider
from window_model.payloads import HyprlandWindow
from window_model.window_info import WindowInfo

logger = logging.getLogger("winspector.providers.hyprland")

RUNTIME_DIR_VAR = "XDG_RUNTIME_DIR"
DEFAULT_RUNTIME_DIR = "/tmp"
NO_WINDOW_REPLY = "Invalid"


class HyprlandProvider(BaseWindowProvider):
    """Single request/response exchange over ``hypr/<signature>/<socket>``."""

    name = "Hyprland"

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(config, environ)
        settings = section(self.config, "hyprland")
        self.socket_name = str(settings.get("socket_name", ".socket2.sock"))
        self.command = str(settings.get("command", "activewindow"))
        self.read_size = int(settings.get("read_size", 4096))
        self.timeout = timeout(self.config, "socket_seconds")

    def socket_path(self) -> Path:
        signature = self.environ.get(HYPRLAND_SIGNATURE_VAR, "")
        if not signature:
            raise ConfigurationError(
                f"{HYPRLAND_SIGNATURE_VAR} not found - are we really running under Hyprland?"
            )
        runtime_dir = self.environ.get(RUNTIME_DIR_VAR) or DEFAULT_RUNTIME_DIR
        return Path(runtime_dir) / "hypr" / signature / self.socket_name

    def get_active_window(self) -> WindowInfo:
        path = self.socket_path()
        raw = self._request(path)
        response = raw.decode("utf-8", errors="replace").strip()
        if not response or response == NO_WINDOW_REPLY:
            raise NotFoundError("No active window found in Hyprland")

        try:
            window = HyprlandWindow.model_validate_json(response)
        except ValidationError as exc:
            raise ProtocolError(f"Failed to decode Hyprland JSON response: {exc}") from exc
        return window.to_window_info()

    def _request(self, path: Path) -> bytes:
        """Send the command and return the bytes of one read."""
        logger.debug("Connecting to Hyprland socket %s", path)
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.settimeout(self.timeout)
            try:
                sock.connect(str(path))
            except OSError as exc:
                raise IPCConnectionError(f"Failed to connect to Hyprland socket {path}: {exc}") from exc
            try:
                sock.sendall(self.command.encode("ascii"))
            except OSError as exc:
                raise IPCConnectionError(f"Failed to send {self.command} request: {exc}") from exc
            try:
                # No length framing: the reply is expected to fit in one read.
                data = sock.recv(self.read_size)
            except OSError as exc:
                raise IPCConnectionError(f"Failed to read Hyprland response: {exc}") from exc
        if not data:
            raise IPCConnectionError("Failed to read Hyprland response: connection closed without a reply")
        if len(data) == self.read_size:
            logger.debug("Hyprland response filled the %d-byte buffer and may be truncated", self.read_size)
        return data
