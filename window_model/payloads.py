"""Pydantic models for the raw payloads returned by each platform.

Only the fields the normalizers consume are required to make sense; all
other keys are accepted and ignored so newer compositor releases keep
parsing. Optional values are ``None`` rather than sentinels so the
fallback rules below stay explicit.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from window_model.window_info import WindowInfo


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ---------------------------------------------------------------------------
# Hyprland (activewindow)
# ---------------------------------------------------------------------------


class HyprlandWorkspace(_Payload):
    id: int = 0
    name: str | None = None


class HyprlandWindow(_Payload):
    """Response of the ``activewindow`` request."""

    address: str | None = None
    mapped: bool = False
    hidden: bool = False
    at: list[int] = Field(default_factory=list)
    size: list[int] = Field(default_factory=list)
    workspace: HyprlandWorkspace = Field(default_factory=HyprlandWorkspace)
    floating: bool = False
    monitor: int | None = None
    window_class: str = Field(default="", alias="class")
    title: str = ""
    initial_class: str | None = Field(default=None, alias="initialClass")
    initial_title: str | None = Field(default=None, alias="initialTitle")
    pid: int = 0
    xwayland: bool = False
    pinned: bool = False
    fullscreen: bool | int = False

    def workspace_label(self) -> str:
        # Unnamed workspaces report an empty name; use the numeric id instead.
        if self.workspace.name:
            return self.workspace.name
        return str(self.workspace.id)

    def to_window_info(self) -> WindowInfo:
        return WindowInfo(
            title=self.title,
            window_class=self.window_class,
            pid=self.pid,
            workspace=self.workspace_label(),
        )


# ---------------------------------------------------------------------------
# Sway (GET_TREE)
# ---------------------------------------------------------------------------


class SwayWindowProperties(_Payload):
    window_class: str | None = Field(default=None, alias="class")
    instance: str | None = None
    title: str | None = None
    transient_for: int | None = None


class SwayNode(_Payload):
    """One container of the layout tree; children are owned by the parent."""

    id: int = 0
    type: str = ""
    name: str | None = None
    focused: bool = False
    representation: str | None = None
    app_id: str | None = None
    pid: int | None = None
    window_properties: SwayWindowProperties | None = None
    nodes: list[SwayNode] = Field(default_factory=list)
    floating_nodes: list[SwayNode] = Field(default_factory=list)

    def find_focused(self) -> SwayNode | None:
        """Depth-first search for the first focused node with window properties.

        Tiled children are searched before floating ones at every level.
        """
        if self.focused and self.window_properties is not None:
            return self
        for child in (*self.nodes, *self.floating_nodes):
            found = child.find_focused()
            if found is not None:
                return found
        return None

    def workspace_label(self) -> str:
        if self.representation is not None:
            return self.representation
        if self.name is not None:
            return self.name
        return ""

    def to_window_info(self) -> WindowInfo:
        props = self.window_properties or SwayWindowProperties()
        return WindowInfo(
            title=props.title or "",
            window_class=props.window_class or "",
            pid=self.pid or 0,
            workspace=self.workspace_label(),
        )


SwayNode.model_rebuild()


# ---------------------------------------------------------------------------
# GNOME Shell (Focused Window D-Bus extension)
# ---------------------------------------------------------------------------


class FocusedWindowInfo(_Payload):
    """JSON document returned by ``FocusedWindow.Get``."""

    title: str | None = None
    wm_class: str | None = None
    wm_class_instance: str | None = None
    pid: int | None = None
    id: int | None = None
    width: int | None = None
    height: int | None = None
    x: int | None = None
    y: int | None = None
    focus: bool | None = None
    in_current_workspace: bool | None = None
    monitor: int | None = None
    role: str | None = None

    def to_window_info(self) -> WindowInfo:
        # The extension exposes no workspace name; the window id stands in.
        return WindowInfo(
            title=self.title or "",
            window_class=self.wm_class or "",
            pid=self.pid or 0,
            workspace=str(self.id or 0),
        )
