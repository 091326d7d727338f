"""Top-level wiring of configuration, detection and dispatch."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.config_runtime import load_effective_config
from core.platform_detector import PlatformTag, detect
from providers.provider_factory import get_active_window_info
from window_model.window_info import WindowInfo

logger = logging.getLogger("winspector.orchestrator")


@dataclass
class RuntimeBundle:
    """Per-invocation state; discarded after one query."""

    config: dict[str, Any]
    platform: PlatformTag


class Orchestrator:
    """Creates the runtime bundle for CLI use."""

    def __init__(
        self,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
        system: str | None = None,
    ) -> None:
        self.config_path = config_path
        self.environ = environ
        self.system = system

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.config_path)
        return RuntimeBundle(config=config, platform=detect(self.environ, self.system))

    def active_window(self) -> WindowInfo:
        bundle = self.build()
        logger.debug("Querying active window on %s", bundle.platform)
        return get_active_window_info(bundle.platform, bundle.config, self.environ)
