"""Sway provider speaking the i3-ipc protocol."""

from __future__ import annotations

import logging
import socket
import struct
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from core.config_runtime import timeout
from core.errors import ConfigurationError, IPCConnectionError, NotFoundError, ProtocolError
from core.platform_detector import SWAY_SOCKET_VAR
from providers.base_provider import BaseWindowProvider
from window_model.payloads import SwayNode
from window_model.window_info import WindowInfo

logger = logging.getLogger("winspector.providers.sway")

IPC_MAGIC = b"i3-ipc"
GET_TREE = 4
# magic, payload length, message type; little-endian
IPC_HEADER = struct.Struct("<6sII")


def encode_message(message_type: int, payload: bytes = b"") -> bytes:
    return IPC_HEADER.pack(IPC_MAGIC, len(payload), message_type) + payload


def recv_exact(sock: socket.socket, size: int) -> bytes:
    """Read exactly ``size`` bytes, failing if the peer closes first."""
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = sock.recv(remaining)
        if not chunk:
            raise IPCConnectionError(
                f"Sway socket closed after {size - remaining} of {size} expected bytes"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class SwayProvider(BaseWindowProvider):
    """Fetches the layout tree and picks the focused window out of it."""

    name = "Sway"

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(config, environ)
        self.timeout = timeout(self.config, "socket_seconds")

    def get_active_window(self) -> WindowInfo:
        socket_path = self.environ.get(SWAY_SOCKET_VAR, "")
        if not socket_path:
            raise ConfigurationError(
                f"{SWAY_SOCKET_VAR} environment variable not found - are we running under Sway?"
            )

        payload = self._get_tree(socket_path)
        try:
            root = SwayNode.model_validate_json(payload)
        except ValidationError as exc:
            raise ProtocolError(f"Failed to decode Sway JSON response: {exc}") from exc

        focused = root.find_focused()
        if focused is None:
            raise NotFoundError("No focused window found in Sway tree")
        return focused.to_window_info()

    def _get_tree(self, socket_path: str) -> bytes:
        logger.debug("Connecting to Sway socket %s", socket_path)
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.settimeout(self.timeout)
            try:
                sock.connect(socket_path)
            except OSError as exc:
                raise IPCConnectionError(f"Failed to connect to Sway socket {socket_path}: {exc}") from exc
            try:
                sock.sendall(encode_message(GET_TREE))
                header = recv_exact(sock, IPC_HEADER.size)
                magic, length, reply_type = IPC_HEADER.unpack(header)
                if magic != IPC_MAGIC:
                    raise ProtocolError(f"Unexpected i3-ipc magic in Sway reply: {magic!r}")
                logger.debug("Sway reply type %d with %d payload bytes", reply_type, length)
                return recv_exact(sock, length)
            except OSError as exc:
                raise IPCConnectionError(f"Failed to talk to Sway over {socket_path}: {exc}") from exc
