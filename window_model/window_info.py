"""Canonical active-window record shared by every provider."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

NO_WINDOW_MESSAGE = "No active window found!"


class WindowInfo(BaseModel):
    """Flat description of the focused window.

    ``window_class`` is serialized as ``class``. A record whose title and
    class are both empty means no window currently has focus.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = ""
    window_class: str = Field(default="", alias="class")
    pid: int = 0
    workspace: str = ""

    def is_empty(self) -> bool:
        return not self.title and not self.window_class

    def __str__(self) -> str:
        if self.is_empty():
            return NO_WINDOW_MESSAGE
        return f"🪟 {self.title} ({self.window_class})"

    def to_json(self, indent: int = 2) -> str:
        """Indented JSON with keys title, class, pid, workspace."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, raw: str | bytes) -> WindowInfo:
        return cls.model_validate_json(raw)
