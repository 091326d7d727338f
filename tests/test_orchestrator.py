"""End-to-end wiring from detection to provider."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import UnsupportedPlatformError
from core.orchestrator import Orchestrator
from core.platform_detector import PlatformTag
from providers.hyprland_provider import HyprlandProvider
from window_model.window_info import WindowInfo


def test_build_detects_platform_and_loads_config() -> None:
    bundle = Orchestrator(environ={"SWAYSOCK": "/tmp/sway.sock"}, system="Linux").build()
    assert bundle.platform is PlatformTag.SWAY
    assert "hyprland" in bundle.config


def test_unknown_platform_raises() -> None:
    with pytest.raises(UnsupportedPlatformError):
        Orchestrator(environ={}, system="Linux").active_window()


def test_active_window_routes_to_detected_provider(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    override = tmp_path / "cfg.yaml"
    override.write_text("hyprland:\n  command: j/activewindow\n")
    seen: dict[str, str] = {}

    def fake(self: HyprlandProvider) -> WindowInfo:
        seen["command"] = self.command
        return WindowInfo(title="t", window_class="c")

    monkeypatch.setattr(HyprlandProvider, "get_active_window", fake)
    orchestrator = Orchestrator(
        config_path=override, environ={"HYPRLAND_INSTANCE_SIGNATURE": "sig"}, system="Linux"
    )

    assert orchestrator.active_window().window_class == "c"
    assert seen["command"] == "j/activewindow"
