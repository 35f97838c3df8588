# devices/device.py
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import List

from common.errors import CapacityExceeded, DeviceKind, Port
from common.logging_utils import get_logger
from common.models import Stream

log = get_logger(__name__)


class WiringState(Enum):
    UNWIRED = "unwired"
    PARTIALLY_WIRED = "partially_wired"
    FULLY_WIRED = "fully_wired"


class Device(ABC):
    """
    Unit with bounded input and output stream slots.

    Capacities are fixed at construction and checked only when a stream is
    connected. Subclasses implement update_outputs(), which reads the current
    input flows and overwrites the output flows in place.

    Known variants: Mixer, Reactor.
    """

    kind: DeviceKind = DeviceKind.GENERIC
    # which message set the capacity guard raises with
    guard: DeviceKind = DeviceKind.GENERIC

    def __init__(self, input_amount: int, output_amount: int, name: str | None = None):
        self.input_amount = input_amount
        self.output_amount = output_amount
        self.name = name or type(self).__name__
        self._inputs: List[Stream] = []
        self._outputs: List[Stream] = []

    # ---------------------- connection protocol ----------------------

    def add_input(self, stream: Stream) -> None:
        self._connect(self._inputs, self.input_amount, Port.INPUT, stream)

    def add_output(self, stream: Stream) -> None:
        self._connect(self._outputs, self.output_amount, Port.OUTPUT, stream)

    def _connect(self, slots: List[Stream], limit: int, port: Port, stream: Stream) -> None:
        extra = {"device": self.name, "op": f"add_{port.value}"}
        if len(slots) >= limit:
            log.warning(f"{port.value} limit {limit} reached, rejecting {stream.get_name()}", extra=extra)
            raise CapacityExceeded(port, self.guard, limit)
        slots.append(stream)
        log.debug(f"connected {stream.get_name()} ({len(slots)}/{limit})", extra=extra)

    def get_inputs(self) -> List[Stream]:
        return list(self._inputs)

    def get_outputs(self) -> List[Stream]:
        return list(self._outputs)

    # ---------------------------- state -----------------------------

    @property
    def state(self) -> WiringState:
        n_in, n_out = len(self._inputs), len(self._outputs)
        if n_in == 0 and n_out == 0:
            return WiringState.UNWIRED
        if n_in == self.input_amount and n_out == self.output_amount:
            return WiringState.FULLY_WIRED
        return WiringState.PARTIALLY_WIRED

    def in_flow(self) -> float:
        return sum((s.get_mass_flow() for s in self._inputs), 0.0)

    def out_flow(self) -> float:
        return sum((s.get_mass_flow() for s in self._outputs), 0.0)

    @abstractmethod
    def update_outputs(self) -> None:
        """Recompute output flows from the current input flows."""

    def __repr__(self) -> str:
        ins = [s.get_name() for s in self._inputs]
        outs = [s.get_name() for s in self._outputs]
        return f"{type(self).__name__}(name={self.name!r}, inputs={ins}, outputs={outs})"
