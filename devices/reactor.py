# devices/reactor.py
from __future__ import annotations

from common.errors import DeviceKind, MissingConnection, Port
from common.logging_utils import get_logger, trace_calls
from devices.device import Device

log = get_logger(__name__)


class Reactor(Device):
    """
    Single-input unit splitting its feed evenly over one or two outputs.

    Uses the generic capacity guard. update_outputs() needs every slot
    connected; an incomplete reactor raises MissingConnection instead of
    writing partial results.
    """

    kind = DeviceKind.REACTOR

    def __init__(self, is_double: bool, name: str | None = None):
        super().__init__(1, 2 if is_double else 1, name=name)

    @property
    def is_double(self) -> bool:
        return self.output_amount == 2

    def _require_connected(self) -> None:
        for port, slots, required in (
            (Port.INPUT, self._inputs, self.input_amount),
            (Port.OUTPUT, self._outputs, self.output_amount),
        ):
            if len(slots) < required:
                log.warning(f"{port.value} slots {len(slots)}/{required}",
                            extra={"device": self.name, "op": "update_outputs"})
                raise MissingConnection(port, len(slots), required)

    @trace_calls(values=True)
    def update_outputs(self) -> float:
        self._require_connected()

        input_mass = self._inputs[0].get_mass_flow()
        share = input_mass / self.output_amount
        for s in self._outputs:
            s.set_mass_flow(share)

        log.trace(f"feed={input_mass:.6g} split x{self.output_amount} at {share:.6g}",
                  extra={"device": self.name, "op": "update_outputs"})
        return input_mass
