"""Desktop session detection from environment variables and OS identity."""

from __future__ import annotations

import logging
import os
import platform
from collections.abc import Mapping
from enum import Enum

logger = logging.getLogger("winspector.detector")

HYPRLAND_SIGNATURE_VAR = "HYPRLAND_INSTANCE_SIGNATURE"
SWAY_SOCKET_VAR = "SWAYSOCK"
DESKTOP_VARS = ("XDG_CURRENT_DESKTOP", "XDG_SESSION_DESKTOP")


class PlatformTag(Enum):
    """Supported window-manager families."""

    UNKNOWN = "Unknown"
    HYPRLAND = "Hyprland"
    SWAY = "Sway"
    GNOME = "GNOME"
    MACOS = "macOS"

    def __str__(self) -> str:
        return self.value


def detect(environ: Mapping[str, str] | None = None, system: str | None = None) -> PlatformTag:
    """Classify the running desktop session.

    The OS check runs first: a macOS session may carry unrelated XDG
    variables. Only variables are inspected, no socket is opened.
    """
    env = os.environ if environ is None else environ
    system_name = platform.system() if system is None else system

    if system_name == "Darwin":
        tag = PlatformTag.MACOS
    elif env.get(HYPRLAND_SIGNATURE_VAR):
        tag = PlatformTag.HYPRLAND
    elif env.get(SWAY_SOCKET_VAR):
        tag = PlatformTag.SWAY
    elif any("gnome" in env.get(name, "").lower() for name in DESKTOP_VARS):
        tag = PlatformTag.GNOME
    else:
        tag = PlatformTag.UNKNOWN

    logger.debug("Detected platform %s (system=%s)", tag, system_name)
    return tag
