"""Base interface for active-window providers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from window_model.window_info import WindowInfo


class BaseWindowProvider(ABC):
    """Abstract window provider interface."""

    name: str = ""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.config = config or {}
        self.environ = os.environ if environ is None else environ

    @abstractmethod
    def get_active_window(self) -> WindowInfo:
        """Return the focused window or raise a ``WindowInspectorError``."""
