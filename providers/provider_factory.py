"""Window provider factory."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.errors import UnsupportedPlatformError
from core.platform_detector import PlatformTag
from providers.base_provider import BaseWindowProvider
from providers.gnome_provider import GnomeProvider
from providers.hyprland_provider import HyprlandProvider
from providers.macos_provider import MacOSProvider
from providers.sway_provider import SwayProvider
from window_model.window_info import WindowInfo

SUPPORTED_PLATFORMS = "Hyprland, Sway, GNOME Shell, macOS"


def build_provider(
    tag: PlatformTag,
    config: dict[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> BaseWindowProvider:
    """Build the provider for a detected platform."""
    if tag == PlatformTag.HYPRLAND:
        return HyprlandProvider(config=config, environ=environ)
    if tag == PlatformTag.SWAY:
        return SwayProvider(config=config, environ=environ)
    if tag == PlatformTag.GNOME:
        return GnomeProvider(config=config, environ=environ)
    if tag == PlatformTag.MACOS:
        return MacOSProvider(config=config, environ=environ)
    raise UnsupportedPlatformError(
        f"Unsupported compositor: {tag}\nSupported: {SUPPORTED_PLATFORMS}"
    )


def get_active_window_info(
    tag: PlatformTag,
    config: dict[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> WindowInfo:
    """Route the query to the platform's provider.

    Provider errors pass through untouched; a failure on one platform never
    falls back to another.
    """
    return build_provider(tag, config=config, environ=environ).get_active_window()
