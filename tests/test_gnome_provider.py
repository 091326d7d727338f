"""GNOME Shell D-Bus provider tests with a stand-in dbus binding."""

from __future__ import annotations

import json
import sys
import types
from unittest.mock import MagicMock

import pytest

from core.errors import UnavailableError
from providers.gnome_provider import GnomeProvider


class FakeDBusException(Exception):
    pass


def _install_dbus(monkeypatch: pytest.MonkeyPatch, bus: MagicMock | None = None, connect_error: bool = False) -> MagicMock:
    bus = bus or MagicMock()

    def session_bus(private: bool = False) -> MagicMock:
        if connect_error:
            raise FakeDBusException("no session bus")
        return bus

    module = types.SimpleNamespace(
        SessionBus=session_bus,
        exceptions=types.SimpleNamespace(DBusException=FakeDBusException),
    )
    monkeypatch.setitem(sys.modules, "dbus", module)
    return bus


def _bus_returning(result: object) -> MagicMock:
    bus = MagicMock()
    method = MagicMock(return_value=result)
    bus.get_object.return_value.get_dbus_method.return_value = method
    return bus


def test_focused_window_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    payload = {
        "title": "Files",
        "wm_class": "org.gnome.Nautilus",
        "wm_class_instance": "org.gnome.Nautilus",
        "pid": 2024,
        "id": 7,
        "width": 800,
        "height": 600,
        "focus": True,
        "maximized": 0,
        "area": {"x": 0},
        "role": None,
    }
    bus = _install_dbus(monkeypatch, _bus_returning(json.dumps(payload)))

    info = GnomeProvider().get_active_window()

    assert info.title == "Files"
    assert info.window_class == "org.gnome.Nautilus"
    assert info.pid == 2024
    assert info.workspace == "7"
    bus.get_object.assert_called_once_with(
        "org.gnome.Shell", "/org/gnome/shell/extensions/FocusedWindow"
    )
    bus.get_object.return_value.get_dbus_method.assert_called_once_with(
        "Get", dbus_interface="org.gnome.shell.extensions.FocusedWindow"
    )
    bus.close.assert_called_once()


def test_empty_document_yields_sentinel(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_dbus(monkeypatch, _bus_returning("{}"))
    info = GnomeProvider().get_active_window()
    assert info.is_empty()
    assert info.workspace == "0"


def test_bus_connect_failure_is_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_dbus(monkeypatch, connect_error=True)
    with pytest.raises(UnavailableError, match="Focused Window D-Bus"):
        GnomeProvider().get_active_window()


def test_method_failure_is_unavailable_and_closes_bus(monkeypatch: pytest.MonkeyPatch) -> None:
    bus = MagicMock()
    bus.get_object.side_effect = FakeDBusException("org.freedesktop.DBus.Error.UnknownObject")
    _install_dbus(monkeypatch, bus)

    with pytest.raises(UnavailableError, match="extension"):
        GnomeProvider().get_active_window()
    bus.close.assert_called_once()


def test_bad_json_is_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_dbus(monkeypatch, _bus_returning("not-json"))
    with pytest.raises(UnavailableError):
        GnomeProvider().get_active_window()


def test_missing_binding_is_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    # A None entry makes ``import dbus`` raise ImportError.
    monkeypatch.setitem(sys.modules, "dbus", None)
    with pytest.raises(UnavailableError):
        GnomeProvider().get_active_window()
