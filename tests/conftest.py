"""Shared fixtures: short socket directories and one-shot Unix socket servers."""

from __future__ import annotations

import shutil
import socket
import tempfile
import threading
from collections.abc import Iterator
from pathlib import Path

import pytest


class OneShotServer:
    """Accepts one client, records its request, then sends canned chunks."""

    def __init__(self, path: Path, chunks: list[bytes], request_size: int) -> None:
        self.path = path
        self.chunks = chunks
        self.request_size = request_size
        self.received = b""
        self._sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self._sock.bind(str(path))
        self._sock.listen(1)
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self) -> None:
        conn, _ = self._sock.accept()
        with conn:
            while len(self.received) < self.request_size:
                data = conn.recv(self.request_size - len(self.received))
                if not data:
                    break
                self.received += data
            for chunk in self.chunks:
                conn.sendall(chunk)

    def close(self) -> None:
        self._thread.join(timeout=2)
        self._sock.close()


@pytest.fixture
def short_tmp() -> Iterator[Path]:
    # AF_UNIX paths are limited to ~100 bytes; pytest's tmp_path can exceed it.
    path = Path(tempfile.mkdtemp(prefix="wi-", dir="/tmp"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def unix_server() -> Iterator:
    servers: list[OneShotServer] = []

    def start(path: Path, chunks: list[bytes], request_size: int) -> OneShotServer:
        path.parent.mkdir(parents=True, exist_ok=True)
        server = OneShotServer(path, chunks, request_size)
        servers.append(server)
        return server

    yield start
    for server in servers:
        server.close()
