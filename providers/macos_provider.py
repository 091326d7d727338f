"""macOS provider driving osascript, with lsappinfo as fallback."""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Mapping
from typing import Any

from core.config_runtime import section, timeout
from core.errors import IPCConnectionError, ProtocolError, WindowInspectorError
from providers.base_provider import BaseWindowProvider
from window_model.window_info import WindowInfo

logger = logging.getLogger("winspector.providers.macos")

DEFAULT_LSAPPINFO = (
    "/System/Library/Frameworks/CoreServices.framework/Frameworks/"
    "LaunchServices.framework/Support/lsappinfo"
)
MACOS_WORKSPACE = "main"

# Needs no accessibility permission; yields "<name>|<pid>".
FRONTMOST_APP_SCRIPT = """
tell application "System Events"
	set frontApp to first application process whose frontmost is true
	set appName to name of frontApp
	set appPID to unix id of frontApp
	return appName & "|" & (appPID as string)
end tell"""

_LSAPPINFO_NAME = re.compile(r'"([^"]+)"')
_LSAPPINFO_PID = re.compile(r"pid=(\d+)")


def _app_window(app_name: str, pid: int) -> WindowInfo:
    # Only the application is visible at this permission level.
    return WindowInfo(title=app_name, window_class=app_name, pid=pid, workspace=MACOS_WORKSPACE)


def parse_osascript_output(output: str) -> WindowInfo:
    result = output.strip()
    if not result:
        raise ProtocolError("No active application found")
    parts = result.split("|")
    if len(parts) < 2:
        raise ProtocolError(f"Unexpected AppleScript output format: {result!r}")
    try:
        pid = int(parts[1])
    except ValueError:
        pid = 0
    return _app_window(parts[0], pid)


def parse_lsappinfo_output(output: str) -> WindowInfo:
    name_match = _LSAPPINFO_NAME.search(output)
    if name_match is None:
        raise ProtocolError("Could not parse app name from lsappinfo output")
    pid_match = _LSAPPINFO_PID.search(output)
    pid = int(pid_match.group(1)) if pid_match else 0
    return _app_window(name_match.group(1), pid)


class MacOSProvider(BaseWindowProvider):
    """Frontmost application lookup through external helpers."""

    name = "macOS"

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(config, environ)
        settings = section(self.config, "macos")
        self.osascript_path = str(settings.get("osascript_path", "osascript"))
        self.lsappinfo_path = str(settings.get("lsappinfo_path", DEFAULT_LSAPPINFO))
        self.timeout = timeout(self.config, "subprocess_seconds")

    def get_active_window(self) -> WindowInfo:
        try:
            return self.frontmost_app_osascript()
        except WindowInspectorError as exc:
            logger.info("osascript lookup failed (%s); falling back to lsappinfo", exc)
        return self.frontmost_app_lsappinfo()

    def frontmost_app_osascript(self) -> WindowInfo:
        output = self._run([self.osascript_path, "-e", FRONTMOST_APP_SCRIPT])
        return parse_osascript_output(output)

    def frontmost_app_lsappinfo(self) -> WindowInfo:
        output = self._run([self.lsappinfo_path, "info", "-only", "name,pid", "-app", "front"])
        return parse_lsappinfo_output(output)

    def _run(self, argv: list[str]) -> str:
        """Run a helper and return its stdout; any failure is a transport error."""
        tool = argv[0].rsplit("/", 1)[-1]
        try:
            res = subprocess.run(argv, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as exc:
            raise IPCConnectionError(f"{tool} timed out after {self.timeout:.1f}s") from exc
        except OSError as exc:
            raise IPCConnectionError(f"Failed to execute {tool}: {exc}") from exc
        if res.returncode != 0:
            detail = res.stderr.strip() or f"exit status {res.returncode}"
            raise IPCConnectionError(f"Failed to execute {tool}: {detail}")
        return res.stdout
