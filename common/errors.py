"""Flow network error hierarchy.

All device and wiring errors inherit from FlowNetworkError so callers can
catch them in one place. Configuration problems are reported by the loader
as plain ValueError / KeyError.
"""
from __future__ import annotations

from enum import Enum


class Port(Enum):
    INPUT = "input"
    OUTPUT = "output"


class DeviceKind(Enum):
    GENERIC = "generic"
    MIXER = "mixer"
    REACTOR = "reactor"


class FlowNetworkError(Exception):
    """Base error for all flow network operations."""


class CapacityExceeded(FlowNetworkError):
    """A stream was connected to a port that is already full.

    ``port`` tells which side overflowed and ``device`` which guard raised it.
    The message text is kept per guard: ``"INPUT STREAM LIMIT!"`` /
    ``"OUTPUT STREAM LIMIT!"`` for the generic device, ``"Too much inputs"`` /
    ``"Too much outputs"`` for the mixer.
    """

    _MESSAGES = {
        (DeviceKind.GENERIC, Port.INPUT): "INPUT STREAM LIMIT!",
        (DeviceKind.GENERIC, Port.OUTPUT): "OUTPUT STREAM LIMIT!",
        (DeviceKind.MIXER, Port.INPUT): "Too much inputs",
        (DeviceKind.MIXER, Port.OUTPUT): "Too much outputs",
    }

    def __init__(self, port: Port, device: DeviceKind = DeviceKind.GENERIC, limit: int | None = None):
        self.port = port
        self.device = device
        self.limit = limit
        super().__init__(self._MESSAGES[(device, port)])


class PreconditionViolated(FlowNetworkError):
    """Device recomputation requested before its wiring allows it."""


class MissingConnection(FlowNetworkError):
    """A required input or output slot is not connected."""

    def __init__(self, port: Port, connected: int, required: int):
        self.port = port
        self.connected = connected
        self.required = required
        super().__init__(
            f"missing {port.value} stream: {connected} connected, {required} required"
        )
