"""Error taxonomy for active-window queries."""

from __future__ import annotations


class WindowInspectorError(Exception):
    """Base class for every error surfaced to the CLI."""


class ConfigurationError(WindowInspectorError):
    """A required environment variable or config file is missing or invalid."""


class IPCConnectionError(WindowInspectorError):
    """Dialing, writing to or reading from the platform transport failed."""


class ProtocolError(WindowInspectorError):
    """Response bytes did not match the expected framing or schema."""


class NotFoundError(WindowInspectorError):
    """The transport worked but no window is currently focused."""


class UnavailableError(WindowInspectorError):
    """The platform service is reachable but a required capability is missing."""


class UnsupportedPlatformError(WindowInspectorError):
    """Platform detection did not recognize the running session."""
