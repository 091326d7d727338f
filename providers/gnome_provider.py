"""GNOME Shell provider backed by the Focused Window D-Bus extension."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from core.config_runtime import section
from core.errors import UnavailableError
from providers.base_provider import BaseWindowProvider
from window_model.payloads import FocusedWindowInfo
from window_model.window_info import WindowInfo

logger = logging.getLogger("winspector.providers.gnome")

UNAVAILABLE_MESSAGE = (
    "Unable to get GNOME active window - make sure the Focused Window D-Bus "
    "GNOME Shell extension is installed and enabled"
)


class GnomeProvider(BaseWindowProvider):
    """Calls ``FocusedWindow.Get`` on the session bus."""

    name = "GNOME Shell"

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(config, environ)
        settings = section(self.config, "gnome")
        self.bus_name = settings.get("bus_name", "org.gnome.Shell")
        self.object_path = settings.get("object_path", "/org/gnome/shell/extensions/FocusedWindow")
        self.interface = settings.get("interface", "org.gnome.shell.extensions.FocusedWindow")
        self.method = settings.get("method", "Get")

    def get_active_window(self) -> WindowInfo:
        raw = self._call_focused_window()
        try:
            info = FocusedWindowInfo.model_validate_json(raw)
        except ValidationError as exc:
            logger.debug("Focused Window extension returned unparsable JSON: %s", exc)
            raise UnavailableError(UNAVAILABLE_MESSAGE) from exc
        return info.to_window_info()

    def _call_focused_window(self) -> str:
        """Return the JSON string produced by the extension.

        A missing binding, bus failure or call failure all mean the same
        thing to the user, so each is reported as ``UnavailableError``.
        """
        try:
            import dbus
        except ImportError as exc:
            logger.debug("dbus-python is not importable: %s", exc)
            raise UnavailableError(UNAVAILABLE_MESSAGE) from exc

        try:
            bus = dbus.SessionBus(private=True)
        except dbus.exceptions.DBusException as exc:
            logger.debug("Failed to connect to the D-Bus session bus: %s", exc)
            raise UnavailableError(UNAVAILABLE_MESSAGE) from exc

        try:
            proxy = bus.get_object(self.bus_name, self.object_path)
            call = proxy.get_dbus_method(self.method, dbus_interface=self.interface)
            return str(call())
        except dbus.exceptions.DBusException as exc:
            logger.debug("%s.%s call failed: %s", self.interface, self.method, exc)
            raise UnavailableError(UNAVAILABLE_MESSAGE) from exc
        finally:
            bus.close()
